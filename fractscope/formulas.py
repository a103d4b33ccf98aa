"""Escape-time iteration for Mandelbrot, Julia and Burning Ship sets."""

from __future__ import annotations

from enum import IntEnum


class FractalKind(IntEnum):
    """The fractal families that can be drawn."""

    MANDELBROT = 0
    JULIA = 1
    BURNING_SHIP = 2


def escape(
    z_real: float,
    z_imag: float,
    c_real: float,
    c_imag: float,
    limit: int,
    burning: bool = False,
) -> int | None:
    """Iterate z -> z**2 + c and return the 1-based step at which |z|**2 exceeds limit.

    limit is both the number of iterations and the squared escape radius.
    With burning, both parts of z are made non-negative before each step.
    Returns None when the point stays bounded for all iterations.
    """
    for step in range(1, int(limit) + 1):
        if burning:
            z_real, z_imag = abs(z_real), abs(z_imag)
        z_real, z_imag = (
            z_real * z_real - z_imag * z_imag + c_real,
            z_real * z_imag * 2 + c_imag,
        )
        if z_real * z_real + z_imag * z_imag > limit:
            return step
    return None