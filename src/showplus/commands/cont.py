"""Command: container preview."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from showplus.commands._base import ShowCommand
from showplus.render.containers import show_framed

if TYPE_CHECKING:
    from showplus.commands._context import AppContext


@click.command(
    cls=ShowCommand,
    examples="""\
  showplus cont 1 2 3
  showplus cont a b c --sep ' - ' --prefix '{' --suffix '}'
  showplus cont 1 2 3 4 5 --sep , --prefix '(' --suffix ')' --every 2""",
)
@click.argument("values", nargs=-1)
@click.option("--sep", "separator", default=None, help="Separator between elements.")
@click.option("--prefix", default=None, help="Opening frame.")
@click.option("--suffix", default=None, help="Closing frame.")
@click.option("--every", "every_n", type=int, default=None, help="Line break every N elements.")
@click.pass_obj
def cont(
    app: AppContext,
    values: tuple[str, ...],
    separator: str | None,
    prefix: str | None,
    suffix: str | None,
    every_n: int | None,
) -> None:
    """Render the values as one framed container."""
    style = app.style(
        app.settings.frame, separator=separator, prefix=prefix, suffix=suffix, every_n=every_n
    )
    app.log.debug("container preview", count=len(values), style=style.model_dump())
    app.emit([show_framed(style, values)])
