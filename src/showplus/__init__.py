"""showplus — type-directed, pure value-to-text rendering.

Every render module is imported here so all ``show`` overloads are
registered whichever submodule a caller reaches for first.
"""

from __future__ import annotations

from showplus.domain.maybe import NOTHING, Just, Maybe, Nothing, from_optional, just
from showplus.domain.result import Result, ResultLike
from showplus.render.containers import (
    show_cont,
    show_cont_with,
    show_cont_with_frame,
    show_cont_with_frame_and_newlines,
)
from showplus.render.generic import register_show, show
from showplus.render.numeric import show_float, show_float_fill_left
from showplus.render.padding import fill_left, fill_right, show_fill_left, show_fill_right
from showplus.render.sums import show_maybe, show_result

__version__ = "0.1.0"

__all__ = [
    "NOTHING",
    "Just",
    "Maybe",
    "Nothing",
    "Result",
    "ResultLike",
    "__version__",
    "fill_left",
    "fill_right",
    "from_optional",
    "just",
    "register_show",
    "show",
    "show_cont",
    "show_cont_with",
    "show_cont_with_frame",
    "show_cont_with_frame_and_newlines",
    "show_fill_left",
    "show_fill_right",
    "show_float",
    "show_float_fill_left",
    "show_maybe",
    "show_result",
]
