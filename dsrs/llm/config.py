"""Client constants, environment resolution, and CLI defaults loading."""

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from .errors import ConfigError

DEFAULT_LLM_ENDPOINT = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_MAX_TOKENS = 1000
MAX_PROMPT_LENGTH = 32000  # ~8k tokens at ~4 chars/token
REQUEST_TIMEOUT_S = 30

API_KEY_ENV_VARS = ("LLM_API_KEY", "OPENAI_API_KEY")
ENDPOINT_ENV_VARS = ("LLM_ENDPOINT", "OPENAI_API_ENDPOINT")

DEFAULT_CONFIG_PATH = Path("dsrs.yaml")


def _first_env(names: tuple[str, ...]) -> str | None:
    """Return the first non-empty value among the named variables."""
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


def resolve_api_key() -> str:
    """Resolve the API key from the environment.

    Read on every call so callers can change the environment between
    requests without rebuilding the client.

    Raises:
        ConfigError: If none of the key variables is set
    """
    api_key = _first_env(API_KEY_ENV_VARS)
    if not api_key:
        raise ConfigError(f"{' or '.join(API_KEY_ENV_VARS)} not set")
    return api_key


def resolve_endpoint() -> str:
    """Resolve the chat-completions URL, falling back to the OpenAI default."""
    return _first_env(ENDPOINT_ENV_VARS) or DEFAULT_LLM_ENDPOINT


@dataclass
class CompletionDefaults:
    """Model parameters used by the CLI when no flag overrides them."""

    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float | None = None


def load_defaults(path: str | Path | None = None) -> CompletionDefaults:
    """Load CLI completion defaults from a YAML file.

    Args:
        path: Path to the YAML file. When omitted, ``dsrs.yaml`` in the
            working directory is used if it exists.

    Returns:
        Completion defaults, built-in values filling anything unset

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValueError: If the file is missing the 'dsrs' section or has bad values
        yaml.YAMLError: If YAML is malformed
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return CompletionDefaults()
        path = DEFAULT_CONFIG_PATH

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or "dsrs" not in data:
        raise ValueError("Configuration file missing 'dsrs' section")

    section = data["dsrs"] or {}
    if not isinstance(section, dict):
        raise ValueError("'dsrs' section must be a mapping")

    unknown = sorted(set(section) - {"model", "max_tokens", "temperature"})
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

    defaults = CompletionDefaults()

    if "model" in section:
        if not isinstance(section["model"], str) or not section["model"]:
            raise ValueError("'model' must be a non-empty string")
        defaults.model = section["model"]

    if "max_tokens" in section:
        max_tokens = section["max_tokens"]
        if isinstance(max_tokens, bool) or not isinstance(max_tokens, int) or max_tokens < 0:
            raise ValueError("'max_tokens' must be a non-negative integer")
        defaults.max_tokens = max_tokens

    if "temperature" in section:
        temperature = section["temperature"]
        if isinstance(temperature, bool) or not isinstance(temperature, (int, float)):
            raise ValueError("'temperature' must be a number")
        defaults.temperature = float(temperature)

    return defaults
