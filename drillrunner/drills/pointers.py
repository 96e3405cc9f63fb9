"""Cons lists and a clone-on-write sequence of integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, MutableSequence, Sequence


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list; ``rest`` is None at the end of the list."""

    value: int
    rest: "Cons | None" = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.value
            cell = cell.rest


def create_empty_list() -> Cons | None:
    """Return the empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """Return a cons list holding a single value."""
    return Cons(1, create_empty_list())


class Cow:
    """A sequence that is borrowed until it must be changed, then copied."""

    def __init__(self, data: Sequence[int], owned: bool = False):
        self.data: Sequence[int] = data
        self.owned = owned

    def to_mut(self) -> MutableSequence[int]:
        """Return a mutable sequence, copying borrowed data first."""
        if not self.owned:
            self.data = list(self.data)
            self.owned = True
        return self.data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> int:
        return self.data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.data)

    def __repr__(self) -> str:
        kind = "Owned" if self.owned else "Borrowed"
        return f"Cow.{kind}({list(self.data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying borrowed data only when needed."""
    for index, value in enumerate(tuple(cow)):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow