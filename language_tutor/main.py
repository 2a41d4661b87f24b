"""Language tutor REPL.

Run with: python -m language_tutor.main TOKEN [LANGUAGE]

Each line typed is sent to the tutor along with the last few exchanges;
the tutor's correction is printed back. Ends on EOF, Ctrl-C or quit/exit.
Any failed request ends the session with a non-zero exit code.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.text import Text

from . import __version__
from .config import settings
from .conversation import DEFAULT_LANGUAGE
from .errors import TurnError
from .tutor import Tutor

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

EXIT_COMMANDS = ("quit", "exit")


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(name)-14s %(levelname)-7s %(message)s",
        datefmt="%H:%M:%S",
    )
    # Suppress noisy HTTP-level logs, they include request URLs on every turn
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


async def _run_repl(tutor: Tutor) -> int:
    console.print(Text(tutor.conversation.preamble), end="")

    try:
        while True:
            try:
                user_input = console.input("> ").strip()
            except (EOFError, KeyboardInterrupt):
                console.print("\n[dim]Goodbye![/]")
                return 0
            except (UnicodeDecodeError, OSError) as e:
                err_console.print(Text(f"Reading input failed: {e}", style="red"))
                return 1

            if not user_input:
                continue
            if user_input.lower() in EXIT_COMMANDS:
                console.print("[dim]Goodbye![/]")
                return 0

            with console.status("[dim]Thinking...[/]", spinner="dots"):
                try:
                    answer = await tutor.ask(user_input)
                except TurnError as e:
                    err_console.print(Text(str(e), style="red"))
                    return 1

            console.print(Text.assemble(("The teacher says: ", "bold blue"), answer))
            console.print()

    finally:
        await tutor.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="language-tutor",
        description="Practice a language with an AI tutor that corrects your grammar.",
    )
    parser.add_argument("token", help="API token for the completions endpoint")
    parser.add_argument(
        "language",
        nargs="?",
        default=DEFAULT_LANGUAGE,
        help=f"Language to practice (default: {DEFAULT_LANGUAGE})",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    _setup_logging(settings.log_level)
    tutor = Tutor(args.token, args.language, settings=settings)
    return asyncio.run(_run_repl(tutor))


if __name__ == "__main__":
    sys.exit(main())
