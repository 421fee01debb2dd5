#!/usr/bin/env python3
"""
Humanize Numbers: Entry Point
=============================

With no arguments, prints the example scoreboard (names ranked by ordinal).
With integer arguments, prints every human-readable form of each one.

Usage:
    python main.py                          # Scoreboard demo
    python main.py 21 1234567 -2            # Humanize the given integers
    python main.py --width u8 300           # Reject values that do not fit u8
    HUMANIZE_ENGLISH_TEENS=1 python main.py 11
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from humanize_numbers.config import Settings
from humanize_numbers.exceptions import HumanizeError, NotAnIntegerError
from humanize_numbers.formatter import HumanNumber, ordinal
from humanize_numbers.models import IntegerWidth, Rendering

logger = logging.getLogger(__name__)


SCOREBOARD = ["Bob", "Victor", "Richard", "John", "Lisa"]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 60


# ─── Pretty Printers ────────────────────────────────────────────────


def print_scoreboard(names: list[str], english_teens: bool = False) -> None:
    """Print each name next to its 1-based ordinal position."""
    for position, name in enumerate(names, start=1):
        print(f"{ordinal(position, english_teens=english_teens)}: {name}")


def print_rendering(rendering: Rendering) -> None:
    """Print all forms of one number (or the reason it could not be spelled)."""
    width = f" {_DIM}({rendering.width.value}){_RESET}" if rendering.width else ""
    digits = rendering.intcomma.replace(",", "")
    print(f"{_BOLD}{_CYAN}{digits}{_RESET}{width}")
    print(f"  Ordinal:   {rendering.ordinal}")
    print(f"  Grouped:   {rendering.intcomma}")
    if rendering.ok:
        print(f"  Text:      {rendering.text}")
        print(f"  Times:     {rendering.times}")
    else:
        print(f"  {_RED}[{rendering.error_code}]{_RESET} {rendering.error_message}")
    print(f"{'─' * _WIDTH}")


def _print_error(raw: str, error: HumanizeError) -> None:
    print(f"{_BOLD}{_RED}{raw}{_RESET}")
    print(f"  {_RED}[{error.code}]{_RESET} {error.message}")
    print(f"{'─' * _WIDTH}")


# ─── Main ────────────────────────────────────────────────────────────


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="humanize-numbers",
        description="Render integers as ordinals, English words, grouped digits and repetition phrases.",
    )
    parser.add_argument(
        "numbers",
        nargs="*",
        help="Integers to humanize. Without any, the scoreboard demo is shown.",
    )
    parser.add_argument(
        "--width",
        choices=[w.value for w in IntegerWidth],
        default=None,
        help="Check every number fits this integer width (e.g. i32, u64).",
    )
    parser.add_argument(
        "--english-teens",
        action="store_true",
        default=None,
        help="Render 11th/12th/13th instead of 11st/12nd/13rd.",
    )
    return parser.parse_args(argv)


def humanize_arguments(raw_numbers: list[str], settings: Settings, width: IntegerWidth | None) -> int:
    """Print every argument's renderings.

    Returns:
        0 if every argument rendered completely, 1 otherwise.
    """
    failures = 0
    for raw in raw_numbers:
        try:
            number = HumanNumber.of(int(raw), width, english_teens=settings.english_teens)
        except ValueError:
            failures += 1
            _print_error(raw, _not_an_integer(raw))
            continue
        except HumanizeError as e:
            failures += 1
            logger.info("Rejected %s: %s", raw, e)
            _print_error(raw, e)
            continue

        rendering = number.render()
        if not rendering.ok:
            failures += 1
        print_rendering(rendering)

    return 0 if failures == 0 else 1


def _not_an_integer(raw: str) -> HumanizeError:
    return NotAnIntegerError(f"Not an integer: {raw!r}", details={"raw": raw})


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit code."""
    args = _parse_args(argv)
    try:
        settings = Settings()
    except ValidationError as e:
        print(f"{_RED}{_BOLD}Invalid HUMANIZE_* configuration{_RESET}", file=sys.stderr)
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            print(f"  {field}: {error['msg']}", file=sys.stderr)
        return 1
    if args.english_teens:
        settings = settings.model_copy(update={"english_teens": True})

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.numbers:
        print_scoreboard(SCOREBOARD, english_teens=settings.english_teens)
        return 0

    width = IntegerWidth(args.width) if args.width else settings.default_width
    return humanize_arguments(args.numbers, settings, width)


if __name__ == "__main__":
    sys.exit(main())
