"""Error handling drills: name tags, token costs and positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")


class _ParseIntError(ValueError):
    """Raised when text is not an integer of the requested width."""


def _parse_int(text: str, bits: int) -> int:
    if not text:
        raise _ParseIntError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise _ParseIntError("invalid digit found in string")
    value = int(text)
    if value >= 1 << (bits - 1):
        raise _ParseIntError("number too large to fit in target type")
    if value < -(1 << (bits - 1)):
        raise _ParseIntError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the text of a name tag; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Items cost 5 tokens each plus a processing fee of 1 token."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, 32)
    return qty * cost_per_item + processing_fee


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy *item_quantity* items if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """Raised when a value is not a positive nonzero integer."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Raised when text cannot be parsed into a PositiveNonzeroInteger.

    ``cause`` is either a CreationError or the integer parsing error.
    """

    def __init__(self, cause: ValueError):
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse *s* as a positive nonzero 64-bit integer."""
    try:
        value = _parse_int(s, 64)
    except _ParseIntError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc