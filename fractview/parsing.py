"""Numeric helpers: linear remapping and parsing of real-number arguments."""

from __future__ import annotations

from itertools import takewhile
from typing import Iterable

_SPACE = "\t\n\v\f\r "
_SIGNS = "+-"
_DIGITS = "0123456789"


def remap(p, new_min, new_max, old_max):
    """Map ``p`` from the range [0, old_max] onto [new_min, new_max].

    Works on plain numbers as well as numpy arrays.
    """
    return (new_max - new_min) * p / old_max + new_min


def _split_sign(text: str) -> tuple[float, str]:
    """Drop leading whitespace and sign characters; return the sign and the rest."""
    body = text.lstrip(_SPACE)
    rest = body.lstrip(_SIGNS)
    signs = body[: len(body) - len(rest)]
    sign = -1.0 if signs.count("-") % 2 else 1.0
    return sign, rest


def parse_real(text: str) -> float:
    """Parse a decimal number leniently.

    Leading whitespace is skipped, any run of ``+``/``-`` signs is folded
    into one sign, and parsing stops at the first character that does not
    fit. Text with no digits gives 0.0.
    """
    sign, rest = _split_sign(text)
    whole = "".join(takewhile(_DIGITS.__contains__, rest))
    result = 0.0
    for ch in whole:
        result = result * 10 + sign * int(ch)
    rest = rest[len(whole):]
    if rest.startswith("."):
        scale = 1.0
        for ch in takewhile(_DIGITS.__contains__, rest[1:]):
            scale /= 10.0
            result = result + sign * int(ch) * scale
    return result


def is_real(text: str) -> bool:
    """Tell whether ``text`` is acceptable as a real-number argument.

    After optional whitespace and signs only digits may follow, with at most
    one decimal point, and that point must have a digit on each side.
    """
    _, body = _split_sign(text)
    dots = 0
    for k, ch in enumerate(body):
        if ch == ".":
            before = k > 0 and body[k - 1] in _DIGITS
            after = k + 1 < len(body) and body[k + 1] in _DIGITS
            if not (before and after):
                return False
            dots += 1
        elif ch not in _DIGITS:
            return False
        if dots > 1:
            return False
    return True


def valid_julia_args(args: Iterable[str]) -> bool:
    """Tell whether every Julia parameter argument is a valid real number."""
    return all(is_real(arg) for arg in args)