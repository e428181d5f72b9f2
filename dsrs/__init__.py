"""DSRS - send a prompt to an OpenAI-compatible chat endpoint."""

from .llm import (
    ApiError,
    ConfigError,
    DSRSError,
    LLMClient,
    NetworkError,
    PromptTooLongError,
)

__version__ = "0.1.0"

__all__ = [
    "LLMClient",
    "DSRSError",
    "PromptTooLongError",
    "ConfigError",
    "NetworkError",
    "ApiError",
]
