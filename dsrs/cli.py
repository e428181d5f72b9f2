"""
DSRS command-line entry point - send one prompt, print the response.

Usage:
    dsrs --prompt "What is the capital of France?"
    dsrs --prompt "Write a haiku about programming" --model gpt-4 --max-tokens 50

Credentials and endpoint come from the environment (or a .env file):
LLM_API_KEY / OPENAI_API_KEY and LLM_ENDPOINT / OPENAI_API_ENDPOINT.
"""

import argparse
import sys
import time
from pathlib import Path

import yaml
from dotenv import find_dotenv, load_dotenv

from .llm import DSRSError, LLMClient
from .llm.config import load_defaults
from .logger import get_logger

logger = get_logger("cli")


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsrs",
        description="Send a prompt to an OpenAI-compatible chat-completions endpoint",
    )
    parser.add_argument(
        "-p", "--prompt",
        required=True,
        help="The prompt to send to the model",
    )
    parser.add_argument(
        "--model",
        help="Model to use (e.g., gpt-3.5-turbo, gpt-4)",
    )
    parser.add_argument(
        "--max-tokens",
        type=_non_negative_int,
        help="Maximum number of tokens in the response",
    )
    parser.add_argument(
        "--temperature",
        type=float,
        help="Sampling temperature (omitted from the request unless set)",
    )
    parser.add_argument(
        "--config",
        help="Path to YAML defaults file (default: ./dsrs.yaml if present)",
    )
    parser.add_argument(
        "--env-file",
        help="Path to .env file (default: nearest .env from the working directory)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.env_file:
        if not Path(args.env_file).exists():
            parser.error(f"env file not found: {args.env_file}")
        load_dotenv(args.env_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))

    try:
        defaults = load_defaults(args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        parser.error(str(e))

    model = args.model if args.model is not None else defaults.model
    max_tokens = args.max_tokens if args.max_tokens is not None else defaults.max_tokens
    temperature = args.temperature if args.temperature is not None else defaults.temperature

    logger.info(
        "cli.complete.start",
        event="cli.complete.start",
        model=model,
        max_tokens=max_tokens,
        temperature=temperature,
        prompt_chars=len(args.prompt),
    )

    start_time = time.time()
    with LLMClient() as client:
        try:
            text = client.complete(args.prompt, model, max_tokens, temperature)
        except DSRSError as e:
            logger.error(
                "cli.complete.error",
                event="cli.complete.error",
                model=model,
                error_type=type(e).__name__,
                error_message=str(e),
                elapsed_ms=int((time.time() - start_time) * 1000),
            )
            print(f"Error: {e}", file=sys.stderr)
            return 1

    logger.info(
        "cli.complete.success",
        event="cli.complete.success",
        model=model,
        response_chars=len(text),
        elapsed_ms=int((time.time() - start_time) * 1000),
    )
    print(f"Response: {text}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
