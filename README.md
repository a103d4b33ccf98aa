# fractscope

Building blocks for exploring three escape-time fractals: the Mandelbrot set,
Julia sets and the Burning Ship. The package provides the per-point
iteration, the mapping between window pixels and the complex plane with
zooming and panning, colour schemes for escape counts, and a set of small
string, byte-buffer, list and stream helpers. It has no dependencies outside
the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## What it does not do

The package does not open a window, draw an image or respond to keyboard and
mouse input, and it installs no command. It computes escape counts, colours
and view coordinates; putting pixels on a screen is left to the caller.

## Fractals

`fractscope.formulas.escape(z_real, z_imag, c_real, c_imag, limit, burning=False)`
iterates `z -> z**2 + c` and returns the 1-based step at which `|z|**2`
exceeds `limit`, or `None` if the point stays bounded. `limit` is both the
number of iterations and the squared escape radius. With `burning=True` both
parts of `z` are made non-negative before each step (Burning Ship).
`FractalKind` names the three families: `MANDELBROT`, `JULIA`, `BURNING_SHIP`.

```python
from fractscope.formulas import escape

escape(0, 0, 1, 0, 50)   # 4
escape(0, 0, 0, 0, 50)   # None
```

## Views

`fractscope.view.View` holds the fractal kind, the Julia constant
(`c_real`, `c_imag`), the spans and offsets of the visible region and the
iteration limit (50 by default). Pixel `(x, y)` of a `width` by `height`
window maps to `x * x_span / width - x_offset` on the real axis and
`y_offset - y * y_span / height` on the imaginary axis; the default window
size is 1060 by 1000.

- `zoom(direction)`: zoom in (`1`) or out (`-1`) about the centre.
- `mouse_zoom(x, y, direction, width, height)`: scale the spans by a tenth,
  out for `1` and in for `-1`, keeping pixel `(x, y)` fixed.
- `pan(dx_steps, dy_steps, divide=10)`: add `dx_steps * x_span / divide` to
  the x offset and `dy_steps * y_span / divide` to the y offset.
- `pixel_to_complex(x, y, width, height)` and
  `complex_to_pixel(real, imag, width, height)` convert between the two.
- `more_iterations()` raises the limit by 50; `fewer_iterations()` lowers it
  by 50 unless it is already 50 or less.

`julia_view(c_real, c_imag)` gives the starting view of a Julia set, and
`view_from_args(args)` builds a starting view from a name (`"Julia"` with
the two parts of `c`, `"Burning_ship"`, anything else for Mandelbrot).

```python
from fractscope.view import View

View().pixel_to_complex(0, 0)   # (-2.1, 1.25)
```

## Colours

`fractscope.palette.Palette` turns a point that escaped at step `index` out
of `iterations` into a packed `0xRRGGBB` integer with `color(index, iterations)`.
`select(scheme)` switches to a `ColorScheme`: `BLUE`, `GREEN`, `RED` (one
channel scaled by the escape ratio), `GRADIENT`, `REVERSE_GRADIENT`, and the
cosine schemes `COSINE_TEAL` and `COSINE_WARM`, which also load their
coefficients `a`, `b`, `c`, `d`.

```python
from fractscope.palette import ColorScheme, Palette

palette = Palette()
palette.color(25, 50)            # 127
palette.select(ColorScheme.RED)
palette.color(25, 50)            # 8323072
```

## Numbers

`fractscope.numparse` has `parse_float` (leading whitespace, optional sign,
`.` or `,` as decimal separator, stops at the first character that does not
fit), `parse_int`, `format_int`, and `validate_number`, which accepts only a
whole string of that form and otherwise raises `NumberFormatError` (a
`ValueError` whose `char` attribute holds the offending character, if any).

```python
from fractscope.numparse import parse_float, validate_number

parse_float("-0,5")       # -0.5
validate_number("1.5x")   # raises NumberFormatError
```

## Other helpers

- `fractscope.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper` for ASCII codes or one-character strings.
- `fractscope.memory`: `zero`, `fill`, `copy`, `move` (overlap-safe),
  `find_byte` and `compare` on byte buffers.
- `fractscope.strsearch`: `find_char`, `find_last_char`, `find_substring`,
  `find_substring_bounded`, `compare_prefix`, `first_containing`,
  `text_length`.
- `fractscope.strbuild`: `bounded_copy`, `bounded_concat`, `duplicate`,
  `join`, `substring`, `trim`, `split`, `map_chars`, `iter_chars`.
- `fractscope.linked`: `LinkedList` of `Node`s with `push_front`,
  `push_back`, `last`, `for_each`, `map`, `clear`, `len()` and iteration.
- `fractscope.linereader`: `LineReader(stream, buffer_size=42)` reads a text
  or binary stream line by line, newline kept; `read_lines` returns them all.
- `fractscope.output`: `put_char`, `put_str`, `put_endl`, `put_number`,
  `print_matrix` and `matrix_length` for writing to text streams.