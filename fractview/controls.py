"""Keyboard and mouse handling for a fractal view."""

from __future__ import annotations

from enum import IntEnum

from .fractal import Variant, View

PAN_STEP = 0.5
WHEEL_UP_FACTOR = 1.1
WHEEL_DOWN_FACTOR = 0.9
ITERATION_STEP = 5
MIN_ITERATIONS = 7
ITERATION_BUMP = 42
ITERATION_LIMIT = 300


class Key(IntEnum):
    """Key codes the viewer reacts to."""

    ESCAPE = 53
    PLUS = 69
    MINUS = 78
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


class Button(IntEnum):
    """Mouse buttons the viewer reacts to."""

    WHEEL_UP = 4
    WHEEL_DOWN = 5


def handle_key(view: View, keycode: int) -> bool:
    """Apply a key press to the view; return True when the viewer should close."""
    if keycode == Key.ESCAPE:
        return True
    if view.variant is Variant.BASIC:
        return False
    step = PAN_STEP * view.zoom
    if keycode == Key.LEFT:
        view.shift_x += step
    elif keycode == Key.RIGHT:
        view.shift_x -= step
    elif keycode == Key.DOWN:
        view.shift_y -= step
    elif keycode == Key.UP:
        view.shift_y += step
    else:
        if keycode == Key.PLUS:
            view.iterations += ITERATION_STEP
        elif keycode == Key.MINUS:
            view.iterations -= ITERATION_STEP
        if view.iterations < MIN_ITERATIONS:
            view.iterations += ITERATION_BUMP
        view.iterations %= ITERATION_LIMIT
    return False


def _apply_wheel(view: View, button: int) -> None:
    if button == Button.WHEEL_UP:
        view.zoom *= WHEEL_UP_FACTOR
    elif button == Button.WHEEL_DOWN:
        view.zoom *= WHEEL_DOWN_FACTOR


def handle_mouse(view: View, button: int, x: int, y: int) -> None:
    """Apply a mouse press at pixel (x, y) to the view.

    The extended viewer keeps the plane point under the cursor in place.
    """
    if view.variant is Variant.BASIC:
        _apply_wheel(view, button)
        return
    before_x, before_y = view.plane_point(x, y)
    _apply_wheel(view, button)
    after_x, after_y = view.plane_point(x, y)
    view.shift_x += before_x - after_x
    view.shift_y += before_y - after_y