"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Holds the merged settings, turns CLI overrides into
validated styles, and writes rendered lines to stdout.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, TypeVar

import click
from pydantic import BaseModel, ValidationError

from showplus.config.logging import configure_logging, get_logger

if TYPE_CHECKING:
    from showplus.config.settings import ShowSettings

_M = TypeVar("_M", bound=BaseModel)


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "value"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ShowSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        self.log = get_logger("showplus.cli")
        if settings.config_path:
            self.log.debug("config in effect", path=str(settings.config_path))

    def style(self, base: _M, **overrides: Any) -> _M:
        """Apply non-None *overrides* on top of *base* and re-validate.

        Raises:
            click.BadParameter: If the merged style is invalid.
        """
        data = base.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return type(base).model_validate(data)
        except ValidationError as exc:
            raise click.BadParameter(_describe(exc)) from exc

    def emit(self, lines: Iterable[str]) -> None:
        """Write each rendered line to stdout."""
        for line in lines:
            click.echo(line)
