"""Fractal views and escape-time rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from .parsing import remap

WIDTH = 600
HEIGHT = 600
BASIC_ITERATIONS = 100
EXTENDED_ITERATIONS = 42
DEFAULT_JULIA_X = -0.52
DEFAULT_JULIA_Y = 0.53
ESCAPE_RADIUS_SQUARED = 4
OUTER_COLOR = 0xFFFFFF
DEEP_COLOR = 0xA
BOUNDED_COLOR = 0x0


class Kind(Enum):
    """The fractal being drawn."""

    MANDELBROT = "Mandelbrot"
    JULIA = "Julia"
    BURNING = "Burning"


class Variant(Enum):
    """Basic viewer, or the extended one with panning and iteration control."""

    BASIC = "basic"
    EXTENDED = "extended"


@dataclass
class View:
    """Everything needed to draw one frame."""

    kind: Kind
    variant: Variant = Variant.BASIC
    zoom: float = 1.0
    shift_x: float = 0.0
    shift_y: float = 0.0
    julia_x: float = DEFAULT_JULIA_X
    julia_y: float = DEFAULT_JULIA_Y
    iterations: int | None = None

    def __post_init__(self) -> None:
        if self.variant is Variant.BASIC and self.kind is Kind.BURNING:
            raise ValueError("the basic viewer has no Burning Ship fractal")
        if self.iterations is None:
            self.iterations = (
                BASIC_ITERATIONS
                if self.variant is Variant.BASIC
                else EXTENDED_ITERATIONS
            )

    @property
    def _flips_y(self) -> bool:
        return self.variant is Variant.BASIC or self.kind is Kind.JULIA

    def _x(self, i):
        return remap(i, -2, 2, WIDTH) * self.zoom + self.shift_x

    def _y(self, j):
        if self._flips_y:
            return remap(j, 2, -2, HEIGHT) * self.zoom + self.shift_y
        return remap(j, -2, 2, HEIGHT) * self.zoom + self.shift_y

    def plane_point(self, i, j) -> tuple[float, float]:
        """Return the point of the complex plane shown at pixel (i, j)."""
        return self._x(i), self._y(j)


def _orbit_start(view: View, x, y, zero):
    """Return the starting z and the constant c for a plane point."""
    if view.kind is Kind.JULIA:
        return x, y, view.julia_x, view.julia_y
    if view.variant is Variant.BASIC:
        return x, y, x, y
    return zero, zero, x, y


def escape_color(count: int, iterations: int) -> int:
    """Colour of a point that escaped after ``count`` of ``iterations`` steps."""
    return int(remap(count, OUTER_COLOR, DEEP_COLOR, iterations))


def escape_count(view: View, i: int, j: int) -> int | None:
    """Return the step at which pixel (i, j) escapes, or None if it never does."""
    x, y = view.plane_point(i, j)
    zx, zy, cx, cy = _orbit_start(view, x, y, 0.0)
    burning = view.kind is Kind.BURNING
    for step in range(1, view.iterations + 1):
        zx, zy = zx * zx - zy * zy + cx, 2 * zx * zy + cy
        if burning:
            zx, zy = abs(zx), abs(zy)
        if zx * zx + zy * zy > ESCAPE_RADIUS_SQUARED:
            return step
    return None


def render(view: View) -> np.ndarray:
    """Draw the view as a (HEIGHT, WIDTH) array of 0xRRGGBB colours."""
    xs = view._x(np.arange(WIDTH, dtype=np.float64))
    ys = view._y(np.arange(HEIGHT, dtype=np.float64))
    x, y = np.meshgrid(xs, ys)
    zx, zy, cx, cy = _orbit_start(view, x, y, np.zeros_like(x))
    zx = np.array(zx, dtype=np.float64)
    zy = np.array(zy, dtype=np.float64)
    burning = view.kind is Kind.BURNING

    counts = np.zeros(x.shape, dtype=np.int64)
    active = np.ones(x.shape, dtype=bool)
    with np.errstate(over="ignore", invalid="ignore"):
        for step in range(1, view.iterations + 1):
            zx, zy = zx * zx - zy * zy + cx, 2 * zx * zy + cy
            if burning:
                zx, zy = np.abs(zx), np.abs(zy)
            escaped = active & (zx * zx + zy * zy > ESCAPE_RADIUS_SQUARED)
            counts[escaped] = step
            active &= ~escaped
            if not active.any():
                break

    image = np.full(x.shape, BOUNDED_COLOR, dtype=np.uint32)
    done = counts > 0
    shades = remap(
        counts[done].astype(np.float64), OUTER_COLOR, DEEP_COLOR, view.iterations
    )
    image[done] = np.trunc(shades).astype(np.uint32)
    return image