"""Command: padded value preview."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from showplus.commands._base import ShowCommand
from showplus.render.padding import padder

if TYPE_CHECKING:
    from showplus.commands._context import AppContext


@click.command(
    cls=ShowCommand,
    examples="""\
  showplus pad 3 42 --width 4 --filler 0
  showplus pad name --width 10 --side right""",
)
@click.argument("values", nargs=-1)
@click.option("--width", type=int, default=None, help="Minimum width.")
@click.option("--filler", default=None, help="Single padding character.")
@click.option(
    "--side",
    type=click.Choice(["left", "right"]),
    default=None,
    help="Side the filler goes on.",
)
@click.pass_obj
def pad(
    app: AppContext,
    values: tuple[str, ...],
    width: int | None,
    filler: str | None,
    side: str | None,
) -> None:
    """Pad each value to a minimum width, one per line."""
    style = app.style(app.settings.pad, width=width, filler=filler, side=side)
    app.log.debug("pad preview", count=len(values), style=style.model_dump())
    render = padder(style)
    app.emit(render(v) for v in values)
