# wiegand_converter/logic.py

from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Optional, Tuple, Union

from .errors import EmptyInput, InvalidFormat, OutOfRange, ParityCheckFailed

log = logging.getLogger(__name__)

WORD_BITS = 26
WORD_MAX = (1 << WORD_BITS) - 1        # 0x3FFFFFF
PAYLOAD_MASK = 0xFFFFFF
FACILITY_MAX = 0xFF
CARD_MAX = 0xFFFF
HALF_MASK = 0xFFF                      # 12 bits covered by each parity bit
HEX_WIDTH = 8

_HEX_RE = re.compile(r"(?:0x)?([0-9A-Fa-f]{1,8})", re.IGNORECASE)
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FACILITY_RE = re.compile(r"(?:FC)?([0-9]+)", re.IGNORECASE)


class InputMode(str, Enum):
    """Which of the three mutually exclusive input forms produced a result."""
    HEX = "hex"
    DECIMAL = "decimal"
    FACILITY_CARD = "facility_card"


@dataclass(frozen=True)
class ConversionResult:
    hex: str
    decimal: int
    facility: int
    card: int
    parity_ok: bool
    source: InputMode
    p1: int
    p2: int
    binary: Optional[str] = None

    def as_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["source"] = self.source.value
        if self.binary is None:
            del d["binary"]
        return d


# ---------------- Bits & parity ----------------
def popcount(value: int) -> int:
    """Number of 1-bits in the 32-bit representation of ``value``."""
    return (value & 0xFFFFFFFF).bit_count()

def expected_parity(payload: int) -> Tuple[int, int]:
    """
    Compute (P1, P2) for a 24-bit payload.

    P1 gives even parity over the upper 12 payload bits,
    P2 gives odd parity over the lower 12 payload bits.
    """
    upper = (payload >> 12) & HALF_MASK
    lower = payload & HALF_MASK
    p1 = popcount(upper) % 2
    p2 = 1 - popcount(lower) % 2
    return p1, p2

def parity_bits(word: int) -> Tuple[int, int]:
    """Actual (P1, P2) carried in a word."""
    return (word >> 25) & 1, word & 1

def _check_range(value: int, field: str, maximum: int, minimum: int = 0) -> int:
    if not minimum <= value <= maximum:
        raise OutOfRange(
            f"{field} must be between {minimum} and {maximum}",
            field, value=value, minimum=minimum, maximum=maximum,
        )
    return value


# ---------------- Codec ----------------
def encode(facility: int, card: int) -> int:
    """Pack a facility code and card number into a 26-bit word with parity."""
    _check_range(facility, "facility", FACILITY_MAX)
    _check_range(card, "card", CARD_MAX)

    payload = (facility << 16) | card
    p1, p2 = expected_parity(payload)
    word = (p1 << 25) | (payload << 1) | p2
    log.debug("encoded facility=%d card=%d -> %08x", facility, card, word)
    return word

def decode(word: int, *, strict: bool = False) -> Tuple[int, int, bool]:
    """
    Split a 26-bit word into (facility, card, parity_ok).

    A parity mismatch only clears ``parity_ok`` unless ``strict`` is set,
    in which case ParityCheckFailed is raised.
    """
    _check_range(word, "word", WORD_MAX)

    payload = (word >> 1) & PAYLOAD_MASK
    facility = (payload >> 16) & FACILITY_MAX
    card = payload & CARD_MAX

    expected = expected_parity(payload)
    actual = parity_bits(word)
    parity_ok = expected == actual
    if not parity_ok:
        if strict:
            raise ParityCheckFailed(word, expected, actual)
        log.debug("parity mismatch in %08x: expected P1=%d P2=%d, got P1=%d P2=%d",
                  word, *expected, *actual)
    return facility, card, parity_ok


# ---------------- Parsing ----------------
def parse_word26_hex(text: str) -> int:
    """Parse 1-8 hex digits (optional 0x prefix) into a 26-bit word."""
    s = "" if text is None else str(text).strip()
    m = _HEX_RE.fullmatch(s)
    if not m:
        raise InvalidFormat("Hex value must be 1-8 hex digits", "hex", text=text)
    value = int(m.group(1), 16)
    return _check_range(value, "hex", WORD_MAX)

def parse_word26_decimal(value: Union[int, str]) -> int:
    """Accept an int or decimal text; reject anything beyond 26 bits."""
    n = _parse_int(value, "decimal")
    return _check_range(n, "decimal", WORD_MAX)

def parse_facility_text(text: Optional[str]) -> int:
    """Parse "160" or "FC160" (prefix is case-insensitive) into a facility code."""
    if text is None or not str(text).strip():
        raise EmptyInput("Facility code is required", "facility")
    s = str(text).strip()
    m = _FACILITY_RE.fullmatch(s)
    if not m:
        raise InvalidFormat(
            "Facility code must be digits with an optional FC prefix", "facility", text=s
        )
    try:
        value = int(m.group(1))
    except ValueError:
        raise InvalidFormat("Facility code is not a number", "facility", text=s) from None
    return _check_range(value, "facility", FACILITY_MAX)

def parse_card_number(value: Union[int, str]) -> int:
    n = _parse_int(value, "card")
    return _check_range(n, "card", CARD_MAX)

def _parse_int(value: Union[int, str], field: str) -> int:
    if isinstance(value, bool):
        raise InvalidFormat(f"{field} must be a decimal integer", field, text=repr(value))
    if isinstance(value, int):
        return value
    s = (value or "").strip()
    if not s:
        raise EmptyInput(f"{field} value is required", field)
    if not _INT_RE.fullmatch(s):
        raise InvalidFormat(f"{field} must be a decimal integer", field, text=s)
    return int(s)


# ---------------- Rendering ----------------
def format_hex(word: int, uppercase: bool = False) -> str:
    """Always 8 characters, zero padded."""
    return f"{word:08X}" if uppercase else f"{word:08x}"

def format_binary(word: int) -> str:
    """Always 26 characters, most significant bit first."""
    return f"{word:026b}"


# ---------------- Dispatch ----------------
def convert(
    mode: InputMode,
    value: Union[int, str],
    card: Union[int, str, None] = None,
    *,
    uppercase: bool = False,
    include_binary: bool = False,
    strict: bool = False,
) -> ConversionResult:
    """
    Run one conversion from exactly one input form.

    - ``InputMode.HEX``: ``value`` is hex text
    - ``InputMode.DECIMAL``: ``value`` is an int or decimal text
    - ``InputMode.FACILITY_CARD``: ``value`` is facility text, ``card`` the card number
    """
    mode = InputMode(mode)
    if mode is InputMode.FACILITY_CARD:
        if card is None:
            raise EmptyInput("Card number is required with a facility code", "card")
        word = encode(parse_facility_text(value), parse_card_number(card))
    elif card is not None:
        raise InvalidFormat(f"A card number cannot be combined with {mode.value} input", "card")
    elif mode is InputMode.HEX:
        word = parse_word26_hex(value)
    else:
        word = parse_word26_decimal(value)

    facility, card_no, parity_ok = decode(word, strict=strict)
    p1, p2 = parity_bits(word)
    return ConversionResult(
        hex=format_hex(word, uppercase),
        decimal=word,
        facility=facility,
        card=card_no,
        parity_ok=parity_ok,
        source=mode,
        p1=p1,
        p2=p2,
        binary=format_binary(word) if include_binary else None,
    )
