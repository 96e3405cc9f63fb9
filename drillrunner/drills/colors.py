"""RGB colours built from three integers, checked for range and length."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class ColorErrorKind(Enum):
    BAD_LEN = "bad_len"
    INT_CONVERSION = "int_conversion"


class IntoColorError(ValueError):
    """Raised when values cannot be turned into a Color."""

    def __init__(self, kind: ColorErrorKind):
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    @classmethod
    def try_from(cls, values: Iterable[int]) -> "Color":
        """Build a Color from exactly three integers in the range 0..=255."""
        components = tuple(values)
        if len(components) != 3:
            raise IntoColorError(ColorErrorKind.BAD_LEN)
        if not all(isinstance(c, int) and 0 <= c <= 255 for c in components):
            raise IntoColorError(ColorErrorKind.INT_CONVERSION)
        red, green, blue = components
        return cls(red=red, green=green, blue=blue)