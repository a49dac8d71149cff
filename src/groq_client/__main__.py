"""Run with: python -m groq_client "your prompt" """

import argparse
import logging
import sys

import httpx
from pydantic import ValidationError

from groq_client.client import GroqClient
from groq_client.config import get_settings
from groq_client.errors import GroqError
from groq_client.models import Message
from groq_client.options import (
    Option,
    with_max_tokens,
    with_model,
    with_stop,
    with_temperature,
    with_top_p,
)

logger = logging.getLogger("groq_client")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="groq_client", description="Send one chat completion request.")
    parser.add_argument("prompt", help="User message")
    parser.add_argument("--system", default=None, help="Optional system message sent first")
    parser.add_argument("--model", default=None)
    parser.add_argument("--temperature", type=float, default=None)
    parser.add_argument("--max-tokens", type=int, default=None)
    parser.add_argument("--top-p", type=float, default=None)
    parser.add_argument("--stop", default=None)
    return parser


def options_from_args(args: argparse.Namespace) -> list[Option]:
    """Only flags given on the command line override the request defaults."""
    options: list[Option] = []
    if args.model is not None:
        options.append(with_model(args.model))
    if args.temperature is not None:
        options.append(with_temperature(args.temperature))
    if args.max_tokens is not None:
        options.append(with_max_tokens(args.max_tokens))
    if args.top_p is not None:
        options.append(with_top_p(args.top_p))
    if args.stop is not None:
        options.append(with_stop(args.stop))
    return options


def main(argv: list[str] | None = None, *, http_client: httpx.Client | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    messages: list[Message] = []
    if args.system:
        messages.append(Message(role="system", content=args.system))
    messages.append(Message(role="user", content=args.prompt))

    with GroqClient(http_client, settings.groq_api_key) as client:
        try:
            completion = client.chat_completion(messages, *options_from_args(args))
        except (GroqError, httpx.HTTPError, ValidationError) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1

    message = completion.choices[0].message if completion.choices else None
    if message and message.content is not None:
        print(message.content)
    logger.debug("Completion %s usage=%s", completion.id, completion.usage)
    return 0


if __name__ == "__main__":
    sys.exit(main())
