"""Command-line entry points and the interactive window."""

from __future__ import annotations

import sys
from typing import Sequence

import numpy as np

from .controls import Key, handle_key, handle_mouse
from .fractal import HEIGHT, WIDTH, Kind, Variant, View
from .parsing import parse_real, valid_julia_args

_PROGRAM_NAMES = {
    Variant.BASIC: "fractview",
    Variant.EXTENDED: "fractview-extended",
}

_KINDS = {
    Variant.BASIC: (Kind.MANDELBROT, Kind.JULIA),
    Variant.EXTENDED: (Kind.MANDELBROT, Kind.JULIA, Kind.BURNING),
}

MAX_JULIA_PARAMS = 2


class UsageError(ValueError):
    """Raised when the command line does not name a drawable fractal."""


def usage(variant: Variant) -> str:
    """Return the help text shown for an invalid command line."""
    prog = _PROGRAM_NAMES[variant]
    lines = [
        "Invalid Arguments!",
        "Please write: ",
        f'{prog} "Mandelbrot"',
        " Or",
        f"{prog} \"Julia\" 'x' 'y'",
        "x and y are real numbers preferably between -2.0 and 2.0",
    ]
    if variant is Variant.EXTENDED:
        lines += [" Or ", f'{prog} "Burning"']
    return "\n".join(lines) + "\n"


def parse_command_line(argv: Sequence[str], variant: Variant) -> View:
    """Build the view described by the arguments (program name excluded)."""
    if not argv:
        raise UsageError(usage(variant))
    name, *params = argv
    try:
        kind = Kind(name)
    except ValueError:
        raise UsageError(usage(variant)) from None
    if kind not in _KINDS[variant]:
        raise UsageError(usage(variant))

    if kind is not Kind.JULIA:
        if params:
            raise UsageError(usage(variant))
        return View(kind=kind, variant=variant)

    if len(params) > MAX_JULIA_PARAMS or not valid_julia_args(params):
        raise UsageError(usage(variant))
    if not params:
        return View(kind=kind, variant=variant)
    julia_x = parse_real(params[0])
    julia_y = parse_real(params[1]) if len(params) == 2 else julia_x
    return View(kind=kind, variant=variant, julia_x=julia_x, julia_y=julia_y)


def _to_rgb(image: np.ndarray) -> np.ndarray:
    """Turn a (HEIGHT, WIDTH) array of 0xRRGGBB into a (WIDTH, HEIGHT, 3) byte array."""
    channels = np.stack(
        [(image >> 16) & 0xFF, (image >> 8) & 0xFF, image & 0xFF], axis=-1
    )
    return channels.transpose(1, 0, 2).astype(np.uint8)


def _draw(pygame, screen, view: View) -> None:
    from .fractal import render

    surface = pygame.surfarray.make_surface(_to_rgb(render(view)))
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def run(view: View) -> int:
    """Open a window showing the view and react to input until it is closed."""
    import os

    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    key_codes = {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_KP_PLUS: Key.PLUS,
        pygame.K_PLUS: Key.PLUS,
        pygame.K_EQUALS: Key.PLUS,
        pygame.K_KP_MINUS: Key.MINUS,
        pygame.K_MINUS: Key.MINUS,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_UP: Key.UP,
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(view.kind.value)
        _draw(pygame, screen, view)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN:
                if handle_key(view, key_codes.get(event.key, -1)):
                    return 0
                if view.variant is Variant.EXTENDED:
                    _draw(pygame, screen, view)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                handle_mouse(view, event.button, x, y)
                _draw(pygame, screen, view)
    finally:
        pygame.quit()


def _start(argv: Sequence[str] | None, variant: Variant) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        view = parse_command_line(args, variant)
    except UsageError as exc:
        sys.stderr.write(str(exc))
        return 1
    return run(view)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the basic viewer."""
    return _start(argv, Variant.BASIC)


def main_extended(argv: Sequence[str] | None = None) -> int:
    """Start the extended viewer with panning and iteration control."""
    return _start(argv, Variant.EXTENDED)