"""structlog setup for showplus.

Everything goes to stderr so rendered text on stdout stays pipeable.
Human mode uses the structlog console renderer; ``--log-json`` switches
to one JSON object per line.  Stdlib loggers under ``showplus.*`` are
routed through the same processor chain.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

_LOGGER_NAME = "showplus"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install a single stderr handler and point structlog at it.

    Safe to call repeatedly: the root handler list is replaced, not
    appended to.

    Args:
        verbose: ``showplus`` loggers emit DEBUG. Otherwise WARNING and up.
        log_json: JSON lines instead of console output.
    """
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(_LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)


def get_logger(name: str, **initial: Any) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to *name* and any *initial* context."""
    return structlog.get_logger(name, **initial)
