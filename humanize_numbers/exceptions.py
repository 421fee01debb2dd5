"""
Custom exception hierarchy for number humanization.

Every exception carries a machine-readable ``code`` so callers (the CLI,
the HTTP API) can report failures without parsing messages.
"""

from __future__ import annotations


class HumanizeError(Exception):
    """Base exception for all humanization failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ScaleOverflowError(HumanizeError):
    """The magnitude needs more thousands-groups than there are scale words."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("SCALE_OVERFLOW", message, details)


class WidthOverflowError(HumanizeError):
    """The value does not fit in the requested integer width."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("WIDTH_OVERFLOW", message, details)


class NotAnIntegerError(HumanizeError):
    """The input is not an integer (floats, strings, booleans)."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NOT_AN_INTEGER", message, details)
