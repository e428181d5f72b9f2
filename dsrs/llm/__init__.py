"""LLM client layer - single-prompt chat completions with typed errors."""

from .client import LLMClient
from .errors import (
    ApiError,
    ConfigError,
    DSRSError,
    NetworkError,
    PromptTooLongError,
)
from .schema import ChatRequest, ChatResponse, Message

__all__ = [
    "LLMClient",
    "ChatRequest",
    "ChatResponse",
    "Message",
    "DSRSError",
    "PromptTooLongError",
    "ConfigError",
    "NetworkError",
    "ApiError",
]
