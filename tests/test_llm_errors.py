"""Tests for client error types."""

import pytest

from dsrs.llm.errors import (
    ApiError,
    ConfigError,
    DSRSError,
    NetworkError,
    PromptTooLongError,
)


def test_error_display():
    """Each error kind renders a single human-readable message."""
    assert str(PromptTooLongError(35000, 32000)) == "Prompt too long: 35000 chars (max: 32000)"
    assert str(ApiError("Rate limited")) == "API error: Rate limited"
    assert str(NetworkError("Connection timeout")) == "Network error: Connection timeout"
    assert str(ConfigError("Missing key")) == "Configuration error: Missing key"


@pytest.mark.parametrize(
    "error",
    [
        PromptTooLongError(1, 0),
        ApiError("x"),
        NetworkError("x"),
        ConfigError("x"),
    ],
)
def test_common_base(error):
    """All kinds can be caught through the base class."""
    assert isinstance(error, DSRSError)
    assert error.__cause__ is None


def test_prompt_too_long_attributes():
    error = PromptTooLongError(40000, 32000)

    assert error.length == 40000
    assert error.max_length == 32000


def test_api_error_status_code():
    """Status code is optional and kept apart from the message."""
    assert ApiError("no response choices returned").status_code is None
    error = ApiError("HTTP 503 Service Unavailable", status_code=503)
    assert error.status_code == 503
    assert error.detail == "HTTP 503 Service Unavailable"
