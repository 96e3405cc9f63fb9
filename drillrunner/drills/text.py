"""String and list drills: colour words, trimming, composing and doubling."""

from __future__ import annotations

from typing import Iterable

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def is_a_color_word(attempt: str) -> bool:
    """Whether *attempt* is one of the known colour words."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends of *text*."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!" to *text*."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" in *text* with "balloons"."""
    return text.replace("cars", "balloons")


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed tuple and a list holding the same elements."""
    a = (10, 20, 30, 40)
    v = list(a)
    return a, v


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of *values* in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]