"""Chat-completion request and response data structures."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Message:
    """A single message in a chat conversation."""

    role: str
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class ChatRequest:
    """Request payload for the chat-completions API."""

    model: str
    messages: list[Message]
    max_tokens: int | None = None
    temperature: float | None = None

    @classmethod
    def for_prompt(
        cls,
        prompt: str,
        model: str,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> "ChatRequest":
        """Build a request holding the prompt as its only user message."""
        return cls(
            model=model,
            messages=[Message(role="user", content=prompt)],
            max_tokens=max_tokens,
            temperature=temperature,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON payload, omitting unset optional fields."""
        payload: dict[str, Any] = {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
        }
        if self.max_tokens is not None:
            payload["max_tokens"] = self.max_tokens
        if self.temperature is not None:
            payload["temperature"] = self.temperature
        return payload


@dataclass
class MessageResponse:
    """The message content within a choice."""

    content: str

    @classmethod
    def from_dict(cls, data: Any) -> "MessageResponse":
        if not isinstance(data, dict):
            raise ValueError("choice message is not an object")
        content = data.get("content")
        if not isinstance(content, str):
            raise ValueError("missing or non-string field 'content'")
        return cls(content=content)


@dataclass
class Choice:
    """A single completion from the API response."""

    message: MessageResponse

    @classmethod
    def from_dict(cls, data: Any) -> "Choice":
        if not isinstance(data, dict) or "message" not in data:
            raise ValueError("choice is missing field 'message'")
        return cls(message=MessageResponse.from_dict(data["message"]))


@dataclass
class ApiErrorPayload:
    """Provider error embedded in a response body."""

    message: str
    type: str
    code: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "ApiErrorPayload":
        if not isinstance(data, dict):
            raise ValueError("field 'error' is not an object")
        message = data.get("message")
        error_type = data.get("type")
        if not isinstance(message, str):
            raise ValueError("error is missing string field 'message'")
        if not isinstance(error_type, str):
            raise ValueError("error is missing string field 'type'")

        # Some providers send numeric codes
        code = data.get("code")
        if code is not None and not isinstance(code, (str, int)):
            raise ValueError("error field 'code' is not a string")
        return cls(
            message=message,
            type=error_type,
            code=str(code) if code is not None else None,
        )

    def describe(self) -> str:
        if self.code is None:
            return f"{self.message} (type: {self.type})"
        return f"{self.message} (type: {self.type}, code: {self.code})"


@dataclass
class ChatResponse:
    """Response from the chat-completions API."""

    choices: list[Choice] = field(default_factory=list)
    error: ApiErrorPayload | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "ChatResponse":
        """Decode a parsed JSON body.

        Raises:
            ValueError: If the body does not have the expected shape
        """
        if not isinstance(data, dict):
            raise ValueError("response body is not a JSON object")
        if "choices" not in data:
            raise ValueError("missing field 'choices'")
        raw_choices = data["choices"]
        if not isinstance(raw_choices, list):
            raise ValueError("field 'choices' is not a list")

        raw_error = data.get("error")
        return cls(
            choices=[Choice.from_dict(c) for c in raw_choices],
            error=ApiErrorPayload.from_dict(raw_error) if raw_error is not None else None,
        )
