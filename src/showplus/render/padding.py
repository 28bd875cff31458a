"""Padding primitives and the padded ``show`` wrappers.

Widths are counted in code points (``len``), the same rule the container
renderer uses for wrap indentation.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from showplus.domain.styles import PadStyle
from showplus.render.generic import show


def fill_left(filler: str, width: int, text: str) -> str:
    """Prepend *filler* until *text* is *width* long.

    Examples:
        >>> fill_left("0", 4, "3")
        '0003'
        >>> fill_left(" ", 2, "12345")
        '12345'
    """
    return text.rjust(width, filler)


def fill_right(filler: str, width: int, text: str) -> str:
    """Append *filler* until *text* is *width* long.

    Examples:
        >>> fill_right(" ", 4, "3")
        '3   '
    """
    return text.ljust(width, filler)


def show_fill_left(filler: str, width: int) -> Callable[[Any], str]:
    """Build ``x -> fill_left(filler, width, show(x))``.

    Examples:
        >>> show_fill_left(" ", 4)(3)
        '   3'
        >>> show_fill_left("0", 4)(3)
        '0003'
        >>> show_fill_left(" ", 4)(12345)
        '12345'
    """
    style = PadStyle(filler=filler, width=width, side="left")
    return lambda x: fill_left(style.filler, style.width, show(x))


def show_fill_right(filler: str, width: int) -> Callable[[Any], str]:
    """Build ``x -> fill_right(filler, width, show(x))``.

    Examples:
        >>> show_fill_right(" ", 4)(3)
        '3   '
    """
    style = PadStyle(filler=filler, width=width, side="right")
    return lambda x: fill_right(style.filler, style.width, show(x))


def padder(style: PadStyle) -> Callable[[Any], str]:
    """Build the padded ``show`` described by *style*."""
    if style.side == "right":
        return show_fill_right(style.filler, style.width)
    return show_fill_left(style.filler, style.width)
