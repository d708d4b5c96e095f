# wiegand_converter/errors.py

"""Typed input-validation failures.

Every error subclasses ``ValueError`` so callers that only care about
"bad input" can keep catching that.
"""
from __future__ import annotations

from typing import Any


class WiegandError(ValueError):
    """Base class for all converter errors."""

    def __init__(self, message: str, field: str | None = None, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.context: dict[str, Any] = {}
        if field is not None:
            self.context["field"] = field
        self.context.update({k: v for k, v in context.items() if v is not None})

    def __str__(self) -> str:
        if not self.context:
            return self.message
        ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.message} [{ctx}]"


class EmptyInput(WiegandError):
    """Required text was missing or blank."""


class InvalidFormat(WiegandError):
    """Text did not match the expected pattern."""

    def __init__(self, message: str, field: str | None = None, text: str | None = None) -> None:
        super().__init__(message, field, text=text)
        self.text = text


class OutOfRange(WiegandError):
    """A parsed value does not fit its field."""

    def __init__(self, message: str, field: str | None = None, *,
                 value: int, minimum: int, maximum: int) -> None:
        super().__init__(message, field, value=value, minimum=minimum, maximum=maximum)
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class ParityCheckFailed(WiegandError):
    """Strict decoding found parity bits that disagree with the payload."""

    def __init__(self, word: int, expected: tuple[int, int], actual: tuple[int, int]) -> None:
        super().__init__(
            "Parity check failed",
            "parity",
            word=f"{word:08x}",
            expected=f"P1={expected[0]} P2={expected[1]}",
            actual=f"P1={actual[0]} P2={actual[1]}",
        )
        self.word = word
        self.expected = expected
        self.actual = actual


__all__ = [
    "WiegandError", "EmptyInput", "InvalidFormat", "OutOfRange", "ParityCheckFailed",
]
