import numpy as np
import pytest

from fractview.fractal import (
    HEIGHT,
    WIDTH,
    Kind,
    Variant,
    View,
    escape_color,
    escape_count,
    render,
)

SAMPLES = [(0, 0), (300, 300), (150, 420), (599, 599), (450, 75), (123, 456), (310, 280)]


def test_default_iterations_per_variant():
    assert View(Kind.MANDELBROT).iterations == 100
    assert View(Kind.MANDELBROT, Variant.EXTENDED).iterations == 42


def test_default_julia_constant():
    view = View(Kind.JULIA)
    assert (view.julia_x, view.julia_y) == (-0.52, 0.53)


def test_basic_burning_is_rejected():
    with pytest.raises(ValueError):
        View(Kind.BURNING, Variant.BASIC)


def test_plane_point_corners_basic():
    view = View(Kind.MANDELBROT)
    assert view.plane_point(0, 0) == (-2.0, 2.0)
    assert view.plane_point(WIDTH, HEIGHT) == (2.0, -2.0)


def test_plane_point_extended_orientation():
    assert View(Kind.MANDELBROT, Variant.EXTENDED).plane_point(0, 0) == (-2.0, -2.0)
    assert View(Kind.BURNING, Variant.EXTENDED).plane_point(0, 0) == (-2.0, -2.0)
    assert View(Kind.JULIA, Variant.EXTENDED).plane_point(0, 0) == (-2.0, 2.0)


def test_plane_point_scales_with_zoom():
    full = View(Kind.MANDELBROT).plane_point(100, 500)
    half = View(Kind.MANDELBROT, zoom=0.5).plane_point(100, 500)
    assert half == (full[0] * 0.5, full[1] * 0.5)


def test_plane_point_applies_shift():
    plain = View(Kind.JULIA, Variant.EXTENDED).plane_point(200, 200)
    shifted = View(Kind.JULIA, Variant.EXTENDED, shift_x=1.0, shift_y=-1.0)
    assert shifted.plane_point(200, 200) == (plain[0] + 1.0, plain[1] - 1.0)


def test_escape_color_range():
    assert escape_color(0, 100) == 0xFFFFFF
    assert escape_color(100, 100) == 0xA
    assert escape_color(42, 42) == 0xA


def test_escape_color_decreases():
    colors = [escape_color(n, 100) for n in range(1, 101)]
    assert colors == sorted(colors, reverse=True)


def test_mandelbrot_centre_is_bounded():
    assert escape_count(View(Kind.MANDELBROT), 300, 300) is None
    assert escape_count(View(Kind.MANDELBROT, Variant.EXTENDED), 300, 300) is None


@pytest.mark.parametrize(
    "view",
    [
        View(Kind.MANDELBROT),
        View(Kind.JULIA),
        View(Kind.MANDELBROT, Variant.EXTENDED),
        View(Kind.BURNING, Variant.EXTENDED),
        View(Kind.JULIA, Variant.EXTENDED),
    ],
)
def test_corner_escapes_within_limit(view):
    count = escape_count(view, 0, 0)
    assert count is not None and 1 <= count <= view.iterations


def test_zero_iterations_never_escape():
    view = View(Kind.MANDELBROT, Variant.EXTENDED, iterations=0)
    assert escape_count(view, 0, 0) is None
    assert not render(view).any()


@pytest.mark.parametrize(
    "view",
    [
        View(Kind.MANDELBROT, zoom=0.8),
        View(Kind.JULIA, julia_x=0.285, julia_y=0.01),
        View(Kind.MANDELBROT, Variant.EXTENDED, zoom=0.7, shift_x=-0.3, shift_y=0.1),
        View(Kind.BURNING, Variant.EXTENDED, shift_y=-0.4),
        View(Kind.JULIA, Variant.EXTENDED, zoom=1.2, shift_x=0.2),
    ],
)
def test_render_matches_pixelwise(view):
    image = render(view)
    assert image.shape == (HEIGHT, WIDTH)
    assert image.dtype == np.uint32
    for i, j in SAMPLES:
        count = escape_count(view, i, j)
        expected = 0 if count is None else escape_color(count, view.iterations)
        assert image[j, i] == expected


def test_render_mandelbrot_has_inside_and_outside():
    image = render(View(Kind.MANDELBROT))
    assert image[300, 300] == 0
    assert image.max() <= 0xFFFFFF
    assert (image == 0).any() and (image > 0).any()