"""
The four number formatters: ordinal, spelled-out text, comma grouping, and
repetition phrases.

Each formatter normalises its input to a ``Magnitude``, does all the work
on the non-negative value, and re-applies the sign prefix ("-" or "minus ")
at the end. The same code serves every integer width; ``HumanNumber`` adds
an optional width check on top.

    >>> ordinal(2), to_text(-21), intcomma(1234567), times(3)
    ('2nd', 'minus twenty-one', '1,234,567', 'three times')
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .exceptions import HumanizeError
from .models import IntegerWidth, Magnitude, Rendering
from .number_to_words import decimal_digits, number_to_words

_ORDINAL_SUFFIXES: dict[int, str] = {1: "st", 2: "nd", 3: "rd"}

_SPECIAL_TIMES: dict[int, str] = {
    -1: "minus one time",
    0: "never",
    1: "once",
    2: "twice",
}


# ─── Ordinal ─────────────────────────────────────────────────────────


def _ordinal_suffix(value: int, english_teens: bool) -> str:
    """Pick the suffix from the last digit.

    With ``english_teens`` off (the default) 11, 12 and 13 follow the last
    digit like everything else: "11st", "12nd", "13rd". This is a known
    quirk kept for compatibility with existing output.
    """
    if english_teens and value % 100 in (11, 12, 13):
        return "th"
    return _ORDINAL_SUFFIXES.get(value % 10, "th")


def ordinal(number: object, english_teens: bool = False) -> str:
    """Render ``number`` as an ordinal string: 1 → "1st", -22 → "-22nd".

    Args:
        number: Any integer.
        english_teens: Use "th" for numbers ending in 11, 12 or 13.
    """
    magnitude = Magnitude.of(number)
    suffix = _ordinal_suffix(magnitude.value, english_teens)
    result = f"{decimal_digits(magnitude.value)}{suffix}"
    return f"-{result}" if magnitude.negative else result


# ─── Spelled-out Text ───────────────────────────────────────────────


def to_text(number: object) -> str:
    """Spell ``number`` out in English: -101 → "minus one hundred and one".

    Raises:
        ScaleOverflowError: If the magnitude is beyond the largest scale word.
    """
    magnitude = Magnitude.of(number)
    text = number_to_words(magnitude.value)
    return f"minus {text}" if magnitude.negative else text


# ─── Comma Grouping ─────────────────────────────────────────────────


def _group_digits(digits: str) -> str:
    if len(digits) <= 3:
        return digits
    first = len(digits) % 3 or 3
    groups = [digits[:first]]
    groups.extend(digits[i:i + 3] for i in range(first, len(digits), 3))
    return ",".join(groups)


def intcomma(number: object) -> str:
    """Insert a comma every three digits: -1234567 → "-1,234,567"."""
    magnitude = Magnitude.of(number)
    grouped = _group_digits(decimal_digits(magnitude.value))
    return f"-{grouped}" if magnitude.negative else grouped


# ─── Repetition ─────────────────────────────────────────────────────


def times(number: object) -> str:
    """Describe a repetition count: 0 → "never", 2 → "twice", 5 → "five times".

    Raises:
        ScaleOverflowError: If the count is too large to spell out.
    """
    n = int(Magnitude.of(number))
    if n in _SPECIAL_TIMES:
        return _SPECIAL_TIMES[n]
    return f"{to_text(n)} times"


# ─── Capability Object ──────────────────────────────────────────────


class HumanNumber(BaseModel):
    """An integer, optionally pinned to a machine width, with all four formatters.

    Usage:
        HumanNumber.of(3, IntegerWidth.U8).ord()        # "3rd"
        HumanNumber.of(300, IntegerWidth.U8)            # WidthOverflowError
    """

    model_config = ConfigDict(frozen=True)

    value: int
    width: Optional[IntegerWidth] = None
    english_teens: bool = False

    @classmethod
    def of(
        cls,
        number: object,
        width: IntegerWidth | str | None = None,
        english_teens: bool = False,
    ) -> HumanNumber:
        resolved = IntegerWidth(width) if width is not None else None
        magnitude = Magnitude.of(number, resolved)
        return cls(value=int(magnitude), width=resolved, english_teens=english_teens)

    def ord(self) -> str:
        return ordinal(self.value, english_teens=self.english_teens)

    def to_text(self) -> str:
        return to_text(self.value)

    def intcomma(self) -> str:
        return intcomma(self.value)

    def times(self) -> str:
        return times(self.value)

    def render(self) -> Rendering:
        """Collect all four forms; a spelling failure is recorded, not raised."""
        rendering = Rendering(
            value=self.value,
            width=self.width,
            ordinal=self.ord(),
            intcomma=self.intcomma(),
        )
        try:
            rendering.text = self.to_text()
            rendering.times = self.times()
        except HumanizeError as e:
            rendering.error_code = e.code
            rendering.error_message = e.message
        return rendering
