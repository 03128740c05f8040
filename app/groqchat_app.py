"""
Console layer
Purpose: terminal-only glue. Reads lines, prints replies and error notices, and
delegates all work to the ChatSession controller. Keeps console concerns separate
from the core so the core can be unit tested without a terminal.
"""

from __future__ import annotations
import argparse
import logging
import os
import sys
from typing import Callable, Optional, Sequence

from dotenv import find_dotenv, load_dotenv

from groqchat.config import load_config
from groqchat.controller import ChatSession
from groqchat.errors import ConfigError, ExchangeError
from groqchat.services.llm_groq import GroqExchangeClient

logger = logging.getLogger(__name__)

NO_REPLY_NOTICE = "No response from the assistant."


# ---------------------------
# Session loop
# ---------------------------
def run_session(
    session: ChatSession,
    *,
    exit_command: str,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Turn loop. Ends on the exit sentinel, end-of-input or Ctrl-C."""
    while True:
        try:
            user_input = read_line("You: ")
        except (EOFError, KeyboardInterrupt):
            write("")
            break
        except UnicodeDecodeError as e:
            write(f"Error: could not decode input: {e}")
            continue

        if user_input == exit_command:
            break

        try:
            reply = session.send(user_input)
        except ExchangeError as e:
            write(f"Error: {e}")
            continue

        if reply is None:
            write(NO_REPLY_NOTICE)
        else:
            write(f"Assistant: {reply.content}")

    write("Goodbye!")


# ---------------------------
# Startup
# ---------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="groqchat",
        description="Chat with your chosen LLM through GroqCloud.",
    )
    parser.add_argument("--model", help="Model identifier (overrides MODEL).")
    parser.add_argument(
        "--env-file",
        help="Path to a .env file (default: nearest .env, if any).",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging on stderr."
    )
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not verbose:
        for name in ("httpx", "httpcore", "openai"):
            logging.getLogger(name).setLevel(logging.WARNING)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    load_dotenv(args.env_file or find_dotenv(usecwd=True), override=False)
    configure_logging(args.verbose)

    try:
        config = load_config(os.environ, model=args.model)
    except ConfigError as e:
        print(e)
        print("Exiting program...")
        return 0

    logger.debug("Loaded %r", config)
    if config.model_defaulted:
        print(f"No MODEL variable set. Defaulting to {config.model}")

    print("Chat with your chosen LLM through GroqCloud!")
    print(f"Type '{config.exit_command}' to quit the chat.")

    client = GroqExchangeClient(config.api_key, base_url=config.base_url)
    try:
        run_session(
            ChatSession(client, config.model),
            exit_command=config.exit_command,
        )
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
