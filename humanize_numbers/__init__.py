"""
Humanize Numbers: integers rendered for people to read.

Ordinals ("21st"), English spelling ("twenty-one"), thousands separators
("1,234") and repetition phrases ("twice"), for every integer width.
"""

from .exceptions import (
    HumanizeError,
    NotAnIntegerError,
    ScaleOverflowError,
    WidthOverflowError,
)
from .formatter import HumanNumber, intcomma, ordinal, times, to_text
from .models import IntegerWidth, Magnitude, Rendering

__version__ = "1.0.0"

__all__ = [
    "HumanNumber",
    "HumanizeError",
    "IntegerWidth",
    "Magnitude",
    "NotAnIntegerError",
    "Rendering",
    "ScaleOverflowError",
    "WidthOverflowError",
    "intcomma",
    "ordinal",
    "times",
    "to_text",
]
