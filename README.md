# fractview

A small window that draws escape-time fractals on a 600 × 600 canvas.

## Installation

```
pip install .
```

## Usage

The basic viewer draws the Mandelbrot set or a Julia set:

```
fractview Mandelbrot
fractview Julia
fractview Julia 0.285
fractview Julia -0.8 0.156
```

The fractal name is matched exactly (`Mandelbrot`, `Julia`, `Burning`).

For a Julia set, give one real number (it is used for both the real and the
imaginary part of the constant) or two numbers, `x` and `y`. Without a number
the constant is `-0.52 + 0.53i`. A number may start with whitespace and signs
(`-0.7`, `+1.25`), followed by digits with at most one decimal point, which
must have a digit on each side: `1.` and `.5` are rejected. Values between
-2.0 and 2.0 give the most interesting pictures.

The basic viewer uses 100 iterations per pixel. The mouse wheel changes the
zoom about the centre of the plane: wheel up multiplies the scale by 1.1
(zooming out), wheel down by 0.9 (zooming in). Escape or closing the window
quits; other keys do nothing.

The extended viewer also draws the Burning Ship fractal and can be navigated:

```
fractview-extended Mandelbrot
fractview-extended Burning
fractview-extended Julia -0.4 0.6
```

| Input                     | Action                                          |
|---------------------------|-------------------------------------------------|
| Mouse wheel               | Zoom, keeping the point under the pointer fixed |
| Arrow keys                | Pan the view by half a unit times the scale     |
| `+` / `=` / keypad `+`    | Raise the iteration count by 5                  |
| `-` / keypad `-`          | Lower the iteration count by 5                  |
| Escape, close button      | Quit                                            |

The extended viewer starts with 42 iterations per pixel. After a key press,
an iteration count below 7 has 42 added to it, and the count is then taken
modulo 300.

If the arguments are not valid, a usage message is printed to standard error
and the program exits with status 1.

## As a library

- `fractview.fractal` holds the enums `Kind` (`MANDELBROT`, `JULIA`, `BURNING`)
  and `Variant` (`BASIC`, `EXTENDED`), and the `View` dataclass with its
  `plane_point(i, j)` method. `escape_count(view, i, j)` returns the step at
  which a pixel escapes, or `None`; `escape_color(count, iterations)` gives its
  colour; `render(view)` returns a `(600, 600)` numpy array of `0xRRGGBB`
  colours, with bounded points black.
- `fractview.parsing` holds `remap`, `parse_real`, `is_real` and
  `valid_julia_args`.
- `fractview.controls` holds the `Key` and `Button` codes and `handle_key` and
  `handle_mouse`, which update a view the way the keyboard and mouse do;
  `handle_key` returns `True` when the viewer should close.
- `fractview.app` holds `parse_command_line(argv, variant)`, which returns a
  `View` or raises `UsageError`, `usage(variant)`, `run(view)`, which opens the
  window, and the entry points `main` and `main_extended`.

## Limits

The window size is fixed at 600 × 600, and pictures are only shown on screen:
there is no option to save an image to a file.

## Tests

```
pip install ".[test]"
pytest
```