"""Command: fixed-precision number preview."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from showplus.commands._base import ShowCommand
from showplus.render.numeric import float_formatter, show_float_fill_left

if TYPE_CHECKING:
    from showplus.commands._context import AppContext


@click.command(
    "float",
    cls=ShowCommand,
    examples="""\
  showplus float 3.14159
  showplus float 3.14159 --left 3 --right 2
  showplus float --width 8 --filler '*' -- -3.14159 2.5""",
)
@click.argument("values", nargs=-1, type=float)
@click.option("--left", "min_left_digits", type=int, default=None, help="Minimum integer digits.")
@click.option("--right", "right_digits", type=int, default=None, help="Digits after the point.")
@click.option(
    "--width", type=int, default=None, help="Pad to this width with --filler instead of zeros."
)
@click.option("--filler", default=None, help="Single padding character for --width.")
@click.pass_obj
def number(
    app: AppContext,
    values: tuple[float, ...],
    min_left_digits: int | None,
    right_digits: int | None,
    width: int | None,
    filler: str | None,
) -> None:
    """Render numbers at fixed precision, one per line."""
    style = app.style(
        app.settings.number, min_left_digits=min_left_digits, right_digits=right_digits
    )
    if width is None:
        fmt = float_formatter(style)
    else:
        pad = app.style(app.settings.pad, filler=filler, width=width)
        fmt = show_float_fill_left(pad.filler, pad.width, style.right_digits)
    app.log.debug("float preview", count=len(values), style=style.model_dump())
    app.emit(fmt(v) for v in values)
