"""Main LLM client interface."""

import requests

from .config import (
    MAX_PROMPT_LENGTH,
    REQUEST_TIMEOUT_S,
    resolve_api_key,
    resolve_endpoint,
)
from .errors import ApiError, NetworkError, PromptTooLongError
from .schema import ChatRequest, ChatResponse


class LLMClient:
    """HTTP client for OpenAI-compatible chat-completion endpoints.

    The client keeps one pooled ``requests.Session`` and nothing else. The
    API key and endpoint are read from the environment on every call and
    never stored.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout_s: float = REQUEST_TIMEOUT_S,
    ):
        """Initialize client.

        Args:
            session: Optional pre-built session (defaults to a new one)
            timeout_s: Per-request timeout in seconds
        """
        self.session = session or requests.Session()
        self.timeout_s = timeout_s

    def __enter__(self) -> "LLMClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()

    def complete(
        self,
        prompt: str,
        model: str,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> str:
        """Send a prompt and return the completion text.

        Args:
            prompt: Text sent as the only user message
            model: Model identifier (e.g., "gpt-3.5-turbo")
            max_tokens: Optional limit on response length, sent as-is
            temperature: Optional sampling temperature, sent as-is

        Returns:
            Content of the first choice, unmodified

        Raises:
            ConfigError: If no API key is configured
            PromptTooLongError: If the prompt exceeds MAX_PROMPT_LENGTH chars
            NetworkError: If the request could not be sent or timed out
            ApiError: If the response is unsuccessful or unusable
        """
        # Config is resolved before the length check so a missing key is
        # always reported first.
        api_key = resolve_api_key()

        if len(prompt) > MAX_PROMPT_LENGTH:
            raise PromptTooLongError(len(prompt), MAX_PROMPT_LENGTH)

        request = ChatRequest.for_prompt(prompt, model, max_tokens, temperature)
        endpoint = resolve_endpoint()

        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

        response = self._send(endpoint, headers, request)
        return self._interpret(response)

    def _send(
        self,
        endpoint: str,
        headers: dict[str, str],
        request: ChatRequest,
    ) -> requests.Response:
        try:
            return self.session.post(
                endpoint,
                headers=headers,
                json=request.to_dict(),
                timeout=self.timeout_s,
            )
        except requests.Timeout:
            detail = f"Request timed out (timeout: {self.timeout_s}s)"
        except requests.exceptions.SSLError:
            detail = "Request failed: TLS error"
        except requests.ConnectionError:
            detail = "Request failed: could not connect"
        except requests.RequestException as e:
            detail = f"Request failed: {type(e).__name__}"

        # Raised outside the handler: the requests exception carries the URL
        # and the prepared request with its Authorization header.
        raise NetworkError(detail)

    def _interpret(self, response: requests.Response) -> str:
        status = response.status_code
        if not 200 <= status < 300:
            reason = response.reason or ""
            raise ApiError(f"HTTP {status} {reason}".rstrip(), status_code=status)

        parse_error = None
        try:
            chat_response = ChatResponse.from_dict(response.json())
        except (ValueError, RecursionError) as e:
            # JSONDecodeError text has only offsets; its .doc holds the body
            parse_error = str(e)

        if parse_error is not None:
            raise ApiError(f"Failed to parse response: {parse_error}", status_code=status)

        if chat_response.error is not None:
            raise ApiError(chat_response.error.describe(), status_code=status)

        if not chat_response.choices:
            raise ApiError("no response choices returned", status_code=status)

        return chat_response.choices[0].message.content
