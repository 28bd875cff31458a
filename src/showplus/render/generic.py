"""Type-directed ``show``.

Dispatch is :func:`functools.singledispatch`: the most specific registered
class in the argument's MRO wins, and unregistered types fall back to
their own ``__str__``.  Other render modules register the container and
sum-type overloads; importing :mod:`showplus` loads them all.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import singledispatch
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

_F = TypeVar("_F", bound=Callable[..., str])


@singledispatch
def show(value: Any) -> str:
    """Render *value* as human-readable text.

    Examples:
        >>> show(42)
        '42'
        >>> show("foo")
        'foo'
        >>> show((1, "one"))
        '(1, one)'
    """
    return str(value)


@show.register(str)
def _show_text(value: str) -> str:
    return value


@show.register(tuple)
def _show_tuple(value: tuple) -> str:  # type: ignore[type-arg]
    if len(value) != 2:
        return str(value)
    first, second = value
    return f"({show(first)}, {show(second)})"


def register_show(cls: type) -> Callable[[_F], _F]:
    """Register a ``show`` overload for *cls*.

    Overloads are picked up by every renderer that calls ``show``
    recursively (pairs, containers, sum types).

    Examples:
        >>> class Point:
        ...     def __init__(self, x, y):
        ...         self.x, self.y = x, y
        >>> @register_show(Point)
        ... def _(p):
        ...     return f"<{p.x}|{p.y}>"
        >>> show([Point(1, 2)])
        '[<1|2>]'
    """

    def decorator(func: _F) -> _F:
        show.register(cls, func)
        logger.debug("Registered show overload for %s", cls.__qualname__)
        return func

    return decorator
