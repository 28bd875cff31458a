"""Container rendering: separators, frames, and periodic line breaks.

Four layers, most general first.  Every element goes through ``show``,
so registered overloads apply inside containers too.  Mappings are
iterated as ``(key, value)`` pairs.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from showplus.domain.styles import FrameStyle
from showplus.render.generic import show


def _elements(xs: Iterable[Any]) -> Iterable[Any]:
    if isinstance(xs, Mapping):
        return xs.items()
    return xs


def show_cont_with_frame_and_newlines(
    separator: str,
    prefix: str,
    suffix: str,
    xs: Iterable[Any],
    new_line_every_nth_elem: int,
) -> str:
    """Join rendered elements, framed, breaking the line every *n* elements.

    With a non-zero *new_line_every_nth_elem*, each element whose index is
    a positive multiple of it starts on a new line indented by
    ``len(prefix)`` spaces, so wrapped lines sit under the first element.
    The separator stays in front of the break.

    Examples:
        >>> show_cont_with_frame_and_newlines(",", "(", ")", [1, 2, 3, 4, 5], 2)
        '(1,2,\\n 3,4,\\n 5)'
    """
    if new_line_every_nth_elem < 0:
        msg = f"new_line_every_nth_elem must be >= 0, got {new_line_every_nth_elem}"
        raise ValueError(msg)

    if new_line_every_nth_elem == 0:
        elem_strs = [show(x) for x in _elements(xs)]
    else:
        newline = "\n" + " " * len(prefix)
        elem_strs = []
        for i, x in enumerate(_elements(xs)):
            if i and i % new_line_every_nth_elem == 0:
                elem_strs.append(newline + show(x))
            else:
                elem_strs.append(show(x))
    return prefix + separator.join(elem_strs) + suffix


def show_cont_with_frame(separator: str, prefix: str, suffix: str, xs: Iterable[Any]) -> str:
    """Frame *xs* without line breaks.

    Examples:
        >>> show_cont_with_frame(" => ", "{", "}", [1, 2, 3])
        '{1 => 2 => 3}'
    """
    return show_cont_with_frame_and_newlines(separator, prefix, suffix, xs, 0)


def show_cont_with(separator: str, xs: Iterable[Any]) -> str:
    """Square brackets around *xs* joined by *separator*.

    Examples:
        >>> show_cont_with(" - ", [1, 2, 3])
        '[1 - 2 - 3]'
    """
    return show_cont_with_frame(separator, "[", "]", xs)


def show_cont(xs: Iterable[Any]) -> str:
    """Render *xs* as ``[a, b, c]``.

    Examples:
        >>> show_cont([1, 2, 3])
        '[1, 2, 3]'
        >>> show_cont({1: "one", 2: "two"})
        '[(1, one), (2, two)]'
    """
    return show_cont_with(", ", xs)


def show_framed(style: FrameStyle, xs: Iterable[Any]) -> str:
    """Render *xs* with every knob taken from *style*."""
    return show_cont_with_frame_and_newlines(
        style.separator, style.prefix, style.suffix, xs, style.every_n
    )


@show.register(list)
def _show_list(value: list) -> str:  # type: ignore[type-arg]
    return show_cont(value)
