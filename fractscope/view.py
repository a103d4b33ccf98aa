"""The visible region of the complex plane and how user input moves it."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from fractscope.formulas import FractalKind
from fractscope.numparse import parse_float

WIDTH = 1060
HEIGHT = 1000

DEFAULT_ITERATIONS = 50
ITERATION_STEP = 50

X_SPAN = 2.65
Y_SPAN = 2.5
Y_OFFSET = 1.25

_X_OFFSETS = {
    FractalKind.MANDELBROT: 2.1,
    FractalKind.JULIA: 1.325,
    FractalKind.BURNING_SHIP: 3.0,
}


def _direction(value: int) -> int:
    if value not in (1, -1):
        raise ValueError("direction must be 1 or -1")
    return value


@dataclass
class View:
    """Which fractal is shown and which part of the plane the window covers.

    A pixel (x, y) of a width-by-height window maps to the complex number
    x * x_span / width - x_offset + i * (y_offset - y * y_span / height).
    """

    kind: FractalKind = FractalKind.MANDELBROT
    c_real: float = 0.0
    c_imag: float = 0.0
    x_span: float = X_SPAN
    y_span: float = Y_SPAN
    x_offset: float = _X_OFFSETS[FractalKind.MANDELBROT]
    y_offset: float = Y_OFFSET
    iterations: int = DEFAULT_ITERATIONS

    def zoom(self, direction: int) -> None:
        """Zoom in (1) or out (-1) about the centre of the window."""
        step = _direction(direction)
        inward = int(step == 1)
        self.x_offset -= step * self.x_span / (20 + 2 * inward)
        self.y_offset -= step * self.y_span / (20 + 2 * inward)
        self.x_span -= step * self.x_span / (10 + inward)
        self.y_span -= step * self.y_span / (10 + inward)

    def mouse_zoom(
        self,
        x: float,
        y: float,
        direction: int,
        width: int = WIDTH,
        height: int = HEIGHT,
    ) -> None:
        """Scale the spans by a tenth (out for 1, in for -1), keeping pixel (x, y) fixed."""
        step = _direction(direction)
        self.x_offset += step * ((self.x_span / 10) * (x / width))
        self.y_offset += step * (self.y_span / 10) * (y / height)
        self.x_span += step * (self.x_span / 10)
        self.y_span += step * (self.y_span / 10)

    def pan(self, dx_steps: int, dy_steps: int, divide: int = 10) -> None:
        """Grow the offsets by the given steps, each step a span divided by divide."""
        if divide == 0:
            raise ValueError("divide must not be zero")
        self.x_offset += dx_steps * (self.x_span / divide)
        self.y_offset += dy_steps * (self.y_span / divide)

    def pixel_to_complex(self, x, y, width: int = WIDTH, height: int = HEIGHT):
        """The complex coordinates (real, imag) under pixel (x, y)."""
        real = x * self.x_span / width - self.x_offset
        imag = self.y_offset - (y * self.y_span) / height
        return real, imag

    def complex_to_pixel(self, real, imag, width: int = WIDTH, height: int = HEIGHT):
        """The pixel coordinates (x, y) of a complex number, not rounded."""
        x = (real + self.x_offset) * (width / self.x_span)
        y = (self.y_offset - imag) * (height / self.y_span)
        return x, y

    def more_iterations(self) -> int:
        """Raise the iteration limit by one step and return it."""
        self.iterations += ITERATION_STEP
        return self.iterations

    def fewer_iterations(self) -> int:
        """Lower the iteration limit by one step unless at the minimum; return it."""
        if self.iterations > ITERATION_STEP:
            self.iterations -= ITERATION_STEP
        return self.iterations


def julia_view(c_real: float, c_imag: float) -> View:
    """The initial view of the Julia set for the constant c."""
    return View(
        kind=FractalKind.JULIA,
        c_real=c_real,
        c_imag=c_imag,
        x_offset=_X_OFFSETS[FractalKind.JULIA],
    )


def view_from_args(args: Sequence[str]) -> View:
    """The initial view for a fractal name and, for Julia, the two parts of c.

    Names other than 'Julia' and 'Burning_ship' give the Mandelbrot view.
    """
    name = args[0] if args else ""
    if name == "Julia":
        if len(args) < 3:
            raise ValueError("Julia needs the real and imaginary parts of c")
        return julia_view(parse_float(args[1]), parse_float(args[2]))
    if name == "Burning_ship":
        return View(
            kind=FractalKind.BURNING_SHIP,
            x_offset=_X_OFFSETS[FractalKind.BURNING_SHIP],
        )
    return View()