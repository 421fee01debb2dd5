"""
Pydantic models for the humanizer: integer widths, magnitudes and renderings.

Signed input is normalised into a ``Magnitude`` (sign + absolute value) at
the boundary. Everything downstream only ever sees a non-negative value.
"""

from __future__ import annotations

import operator
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import NotAnIntegerError, WidthOverflowError
from .number_to_words import decimal_digits


# ─── Integer Widths ─────────────────────────────────────────────────


class IntegerWidth(str, Enum):
    """Concrete machine integer widths a value can be checked against."""

    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    ISIZE = "isize"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    USIZE = "usize"

    @property
    def signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def bits(self) -> int:
        suffix = self.value[1:]
        return 64 if suffix == "size" else int(suffix)

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def check(self, value: int) -> int:
        """Return ``value`` unchanged if it fits this width.

        Raises:
            WidthOverflowError: If ``value`` is outside [min_value, max_value].
        """
        if not self.min_value <= value <= self.max_value:
            shown = ("-" if value < 0 else "") + decimal_digits(abs(value))
            raise WidthOverflowError(
                f"{shown} does not fit in {self.value} "
                f"(range {self.min_value}..{self.max_value})",
                details={
                    "width": self.value,
                    "min": self.min_value,
                    "max": self.max_value,
                    "value": shown,
                },
            )
        return value


# ─── Magnitude ──────────────────────────────────────────────────────


def as_integer(value: object) -> int:
    """Coerce anything implementing ``__index__`` into a plain ``int``.

    Raises:
        NotAnIntegerError: For booleans, floats, strings and other non-integers.
    """
    if isinstance(value, bool):
        raise NotAnIntegerError(
            f"Booleans are not numbers to humanize: {value!r}",
            details={"type": "bool"},
        )
    try:
        return operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        raise NotAnIntegerError(
            f"Expected an integer, got {type(value).__name__}: {value!r}",
            details={"type": type(value).__name__},
        ) from None


class Magnitude(BaseModel):
    """An integer split into its sign and absolute value."""

    model_config = ConfigDict(frozen=True)

    negative: bool = False
    value: int = Field(ge=0)

    @classmethod
    def of(cls, number: object, width: IntegerWidth | None = None) -> Magnitude:
        """Normalise ``number`` (optionally range-checked against ``width``)."""
        n = as_integer(number)
        if width is not None:
            width.check(n)
        return cls(negative=n < 0, value=abs(n))

    def __int__(self) -> int:
        return -self.value if self.negative else self.value


# ─── Rendering ──────────────────────────────────────────────────────


class Rendering(BaseModel):
    """All four human-readable forms of a single integer.

    ``text`` and ``times`` are ``None`` when the number is too large to spell
    out; ``error_code`` / ``error_message`` then say why.
    """

    value: int
    width: Optional[IntegerWidth] = None
    ordinal: Optional[str] = None
    text: Optional[str] = None
    intcomma: Optional[str] = None
    times: Optional[str] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_code is None
