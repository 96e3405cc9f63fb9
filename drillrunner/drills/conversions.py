"""Conversion drills: averaging, byte and char counts, and parsing people."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

_USIZE = re.compile(r"\+?[0-9]+")


def average(values: Sequence[float]) -> float:
    """Return the arithmetic mean of *values*."""
    return sum(values) / len(values)


def byte_counter(arg: str) -> int:
    """Number of UTF-8 bytes in *arg*."""
    return len(str(arg).encode("utf-8"))


def char_counter(arg: str) -> int:
    """Number of characters in *arg*."""
    return len(str(arg))


def num_sq(value: int) -> int:
    """Return the square of *value*."""
    return value * value


def _parse_usize(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _USIZE.fullmatch(text):
        raise ValueError("invalid digit found in string")
    return int(text)


class ParsePersonErrorKind(Enum):
    EMPTY = "empty"
    BAD_LEN = "bad_len"
    NO_NAME = "no_name"
    PARSE_INT = "parse_int"


class ParsePersonError(ValueError):
    """Raised when text cannot be parsed into a Person."""

    def __init__(self, kind: ParsePersonErrorKind, message: str = ""):
        super().__init__(message or kind.value)
        self.kind = kind


@dataclass(frozen=True)
class Person:
    name: str
    age: int

    @classmethod
    def default(cls) -> "Person":
        return cls(name="John", age=30)

    @classmethod
    def from_text(cls, s: str) -> "Person":
        """Parse "name,age", falling back to the default person on any problem."""
        try:
            return cls.parse(s)
        except ParsePersonError:
            return cls.default()

    @classmethod
    def parse(cls, s: str) -> "Person":
        """Parse "name,age"; raise ParsePersonError describing what is wrong."""
        if not s:
            raise ParsePersonError(ParsePersonErrorKind.EMPTY)
        fields = s.split(",")
        if len(fields) != 2:
            raise ParsePersonError(ParsePersonErrorKind.BAD_LEN)
        name, age_text = fields
        if not name:
            raise ParsePersonError(ParsePersonErrorKind.NO_NAME)
        try:
            age = _parse_usize(age_text)
        except ValueError as exc:
            raise ParsePersonError(ParsePersonErrorKind.PARSE_INT, str(exc)) from exc
        return cls(name=name, age=age)