"""
Convert a non-negative integer into written-out English words.

The number is split into thousands-groups ("chunks") from the right. Each
chunk is spelled on its own and followed by its scale word:

    1,234,567 → (1)(234)(567)
              → "one" million / "two hundred and thirty-four" thousand /
                "five hundred and sixty-seven"

Chunk rendering is a small table of named cases keyed on the chunk's digit
count, so every grammar rule can be tested in isolation.
"""

from __future__ import annotations

import logging

from .exceptions import ScaleOverflowError

logger = logging.getLogger(__name__)

# A chunk is one to three decimal digits, most significant first.
Chunk = tuple[int, ...]

# ─── Word Lookup Tables ──────────────────────────────────────────────

UNITS: tuple[str, ...] = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
)

TEENS: tuple[str, ...] = (
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)

TENS: tuple[str, ...] = (
    "", "ten", "twenty", "thirty", "forty", "fifty", "sixty", "seventy",
    "eighty", "ninety",
)

SCALES: tuple[str, ...] = (
    "",
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
)

MAX_CHUNKS = len(SCALES)

# Largest magnitude that can still be spelled out (999 septillion ...).
MAX_SPELLABLE = 10 ** (3 * MAX_CHUNKS) - 1


# ─── Chunking ────────────────────────────────────────────────────────


def thousands_groups(value: int) -> list[int]:
    """Split a non-negative integer into base-1000 groups, most significant first.

    Works by repeated ``divmod`` so it is not subject to the interpreter's
    int-to-str digit limit.

        >>> thousands_groups(1234567)
        [1, 234, 567]
    """
    groups: list[int] = []
    while True:
        value, group = divmod(value, 1000)
        groups.append(group)
        if not value:
            break
    groups.reverse()
    return groups


def decimal_digits(value: int) -> str:
    """Plain decimal digits of a non-negative integer of any length."""
    head, *rest = thousands_groups(value)
    return str(head) + "".join(f"{g:03d}" for g in rest)


def split_chunks(value: int) -> list[Chunk]:
    """Split the decimal digits of ``value`` into thousands-groups.

    The leftmost chunk holds the 1 or 2 leftover digits (if any); every
    other chunk has exactly 3 digits.

        >>> split_chunks(1234567)
        [(1,), (2, 3, 4), (5, 6, 7)]
    """
    head, *rest = thousands_groups(value)
    chunks: list[Chunk] = [tuple(int(d) for d in str(head))]
    for group in rest:
        chunks.append((group // 100, group // 10 % 10, group % 10))
    return chunks


# ─── Chunk Renderers ─────────────────────────────────────────────────


def _render_one_digit(chunk: Chunk) -> str:
    return UNITS[chunk[0]]


def _render_two_digits(chunk: Chunk) -> str:
    tens, units = chunk
    if tens == 0:
        return UNITS[units]
    if tens == 1:
        return TEENS[units]
    if units:
        return f"{TENS[tens]}-{UNITS[units]}"
    return TENS[tens]


def _render_three_digits(chunk: Chunk) -> str:
    """Render a full chunk, e.g. (3, 1, 5) → "three hundred and fifteen".

    A zero hundreds digit drops the "hundred" prefix and the chunk is
    spelled as its trailing digits.
    """
    hundreds, tens, units = chunk
    if hundreds == 0:
        return _render_two_digits((tens, units))
    prefix = f"{UNITS[hundreds]} hundred"
    if tens == 0 and units == 0:
        return prefix
    return f"{prefix} and {_render_two_digits((tens, units))}"


_CHUNK_RENDERERS = {
    1: _render_one_digit,
    2: _render_two_digits,
    3: _render_three_digits,
}


def render_chunk(chunk: Chunk) -> str:
    """Spell a single chunk; an all-zero chunk renders as ``""``."""
    return _CHUNK_RENDERERS[len(chunk)](chunk)


# ─── Main Converter ─────────────────────────────────────────────────


def number_to_words(value: int) -> str:
    """Spell out a non-negative integer in English.

    Args:
        value: e.g. 1250000

    Returns:
        "one million two hundred and fifty thousand"

    Raises:
        ScaleOverflowError: If the number has more thousands-groups than
            there are scale words (anything above ``MAX_SPELLABLE``).
        ValueError: If ``value`` is negative. Signs are handled by the caller.
    """
    if value < 0:
        raise ValueError("Expected a non-negative magnitude, got a negative value")
    if value == 0:
        return "zero"

    if value > MAX_SPELLABLE:
        chunk_count = len(thousands_groups(value))
        logger.warning(
            "Cannot spell number: %d chunks exceed %d scale words",
            chunk_count, MAX_CHUNKS,
        )
        raise ScaleOverflowError(
            f"Number has {chunk_count} thousands-groups but only {MAX_CHUNKS} "
            f"scale words are available (largest spellable value is "
            f"{MAX_SPELLABLE}).",
            details={"chunks": chunk_count, "max_chunks": MAX_CHUNKS},
        )

    chunks = split_chunks(value)
    logger.debug("Split %d into chunks %s", value, chunks)

    words: list[str] = []
    for position, chunk in enumerate(chunks):
        rendered = render_chunk(chunk)
        if not rendered:
            continue  # 000 contributes neither words nor a scale
        words.append(rendered)
        scale = SCALES[len(chunks) - position - 1]
        if scale:
            words.append(scale)

    return " ".join(words)
