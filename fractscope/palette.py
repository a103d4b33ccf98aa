"""Colour schemes mapping escape iteration counts to packed RGB colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum


class ColorScheme(IntEnum):
    """Colour schemes, numbered by the key that selects them."""

    BLUE = 1
    GREEN = 2
    RED = 3
    GRADIENT = 4
    REVERSE_GRADIENT = 5
    COSINE_TEAL = 6
    COSINE_WARM = 7


_SHIFTS = {ColorScheme.BLUE: 0, ColorScheme.GREEN: 8, ColorScheme.RED: 16}
_FULL = 16777216


def _pack(red: float, green: float, blue: float) -> int:
    return (int(red) << 16) + (int(green) << 8) + int(blue)


def _scaled(red: float, green: float, blue: float) -> int:
    return _pack(red * 255, green * 255, blue * 255)


_COEFFICIENTS = {
    ColorScheme.COSINE_WARM: (
        _scaled(0.938, 0.328, 0.718),
        _scaled(0.659, 0.438, 0.328),
        _scaled(0.388, 0.388, 0.296),
        _scaled(2.538, 2.478, 0.168),
    ),
    ColorScheme.COSINE_TEAL: (
        _pack(0, 125.5, 125.5),
        _pack(0, 125.5, 125.5),
        _pack(0, 125.5, 85),
        _pack(0, 125.5, 170),
    ),
}


@dataclass
class Palette:
    """The active colour scheme and the cosine coefficients a, b, c, d."""

    scheme: ColorScheme = ColorScheme.BLUE
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0

    def select(self, scheme: ColorScheme | int) -> None:
        """Switch scheme; cosine schemes also load their coefficients."""
        self.scheme = ColorScheme(scheme)
        if self.scheme in _COEFFICIENTS:
            self.a, self.b, self.c, self.d = _COEFFICIENTS[self.scheme]

    def color(self, index: int, iterations: int) -> int:
        """Colour of a point that escaped at step index out of iterations."""
        ratio = index / iterations
        if self.scheme in _SHIFTS:
            return int(ratio * 255) << _SHIFTS[self.scheme]
        if self.scheme is ColorScheme.GRADIENT:
            return int(ratio * _FULL)
        if self.scheme is ColorScheme.REVERSE_GRADIENT:
            return int((1 - ratio) * _FULL)
        return int(
            self.a
            + self.b * math.cos(2 * 3.14159 * (self.c * (index / 100) + self.d))
        )