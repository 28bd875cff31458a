"""Tagged renderers for optional and ok/error values."""

from __future__ import annotations

from typing import Any

from showplus.domain.maybe import Just, Maybe, Nothing
from showplus.domain.result import Result, ResultLike
from showplus.render.generic import show

NOTHING_TAG = "Nothing"
JUST_TAG = "Just"
OK_TAG = "Ok"
ERROR_TAG = "Error"


def show_maybe(maybe: Maybe | Any) -> str:
    """Render an optional as ``Nothing`` or ``Just <payload>``.

    Objects implementing :class:`Maybe` are asked directly.  Plain Python
    optionals work too: ``None`` is absent, anything else is present.

    Examples:
        >>> show_maybe(Just(42))
        'Just 42'
        >>> show_maybe(None)
        'Nothing'
    """
    if isinstance(maybe, Maybe):
        if maybe.is_nothing():
            return NOTHING_TAG
        return f"{JUST_TAG} {show(maybe.unsafe_get_just())}"
    if maybe is None:
        return NOTHING_TAG
    return f"{JUST_TAG} {show(maybe)}"


def show_result(result: ResultLike) -> str:
    """Render an outcome as ``Ok <value>`` or ``Error <error>``.

    Examples:
        >>> show_result(Result.success(42))
        'Ok 42'
        >>> show_result(Result.failure("fail"))
        'Error fail'
    """
    if result.is_error():
        return f"{ERROR_TAG} {show(result.unsafe_get_error())}"
    return f"{OK_TAG} {show(result.unsafe_get_ok())}"


show.register(Just, show_maybe)
show.register(Nothing, show_maybe)
show.register(Result, show_result)
