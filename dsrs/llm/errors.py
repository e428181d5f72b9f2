"""Error types raised by the LLM client.

None of these carry the API key, the endpoint URL, or raw request/response
bodies, so their messages are safe to print or log.
"""


class DSRSError(Exception):
    """Base class for all client errors."""

    prefix = "Error"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)

    def __str__(self) -> str:
        return f"{self.prefix}: {self.detail}"


class PromptTooLongError(DSRSError):
    """Prompt exceeds the maximum allowed length. Never reaches the network."""

    def __init__(self, length: int, max_length: int):
        self.length = length
        self.max_length = max_length
        super().__init__(f"{length} chars (max: {max_length})")

    def __str__(self) -> str:
        return f"Prompt too long: {self.length} chars (max: {self.max_length})"


class ConfigError(DSRSError):
    """Credential resolution failed. Never reaches the network."""

    prefix = "Configuration error"


class NetworkError(DSRSError):
    """Transport-level failure (connection, timeout, TLS). No response body."""

    prefix = "Network error"


class ApiError(DSRSError):
    """A response arrived but was unsuccessful or unusable."""

    prefix = "API error"

    def __init__(self, detail: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(detail)
