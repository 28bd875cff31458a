"""Fixed-precision number rendering.

Rounding is Python's fixed-point formatting: correctly rounded from the
exact binary value, ties to even (the ``printf("%.*f")`` rule).  The sign
comes from ``x < 0`` before rounding, so ``-0.0`` prints unsigned while
``-0.0001`` at three digits prints ``-0.000``.

The minus sign gets its own slot: a negative value uses one less digit
of zero padding, so ``show_float(3, 3)(-3.14159)`` is ``-03.142``.  The
decimal point always counts toward the zero-pad width, even at zero
decimals: ``show_float(3, 0)(3.14159)`` is ``0003``.

``Fraction`` input is rounded exactly (ties to even) before formatting.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from fractions import Fraction

from showplus.domain.styles import FloatStyle, PadStyle
from showplus.render.padding import fill_left

Number = int | float | Decimal | Fraction


def _fraction_digits(x: Fraction, right_digits: int) -> Decimal:
    # round() on a Fraction is exact and ties to even; the string keeps every digit
    scaled = round(x * 10**right_digits)
    return Decimal(f"{scaled}E-{right_digits}")


def _render_fixed(x: Number, min_left_digits: int, right_digits: int) -> str:
    # NaN has no sign; Decimal NaN also refuses ordered comparison
    is_negative = x == x and x < 0
    if is_negative and min_left_digits > 0:
        min_left_digits -= 1
    magnitude = abs(x)
    if isinstance(magnitude, Fraction):
        magnitude = _fraction_digits(magnitude, right_digits)
    digits = format(magnitude, f".{right_digits}f")
    # inf / nan: nothing to zero-pad
    if digits[0].isdigit():
        digits = fill_left("0", min_left_digits + 1 + right_digits, digits)
    if is_negative:
        return "-" + digits
    return digits


def show_float(min_left_digits: int, right_digits: int) -> Callable[[Number], str]:
    """Build a formatter with *right_digits* decimals and a zero-padded integer part.

    Examples:
        >>> pi = 3.14159
        >>> show_float(0, 3)(pi)
        '3.142'
        >>> show_float(2, 3)(pi)
        '03.142'
        >>> show_float(1, 7)(pi)
        '3.1415900'
        >>> show_float(2, 3)(-pi)
        '-3.142'
        >>> show_float(3, 3)(-pi)
        '-03.142'
        >>> show_float(2, 3)(0.142)
        '00.142'
    """
    style = FloatStyle(min_left_digits=min_left_digits, right_digits=right_digits)
    return float_formatter(style)


def float_formatter(style: FloatStyle) -> Callable[[Number], str]:
    """Build the formatter described by *style*."""
    left, right = style.min_left_digits, style.right_digits
    return lambda x: _render_fixed(x, left, right)


def show_float_fill_left(filler: str, width: int, right_digits: int) -> Callable[[Number], str]:
    """Build a fixed-precision formatter left-padded with *filler*.

    The integer part is never zero-padded here; all extra width comes from
    *filler*.

    Examples:
        >>> pi = 3.14159
        >>> show_float_fill_left(" ", 8, 3)(pi)
        '   3.142'
        >>> show_float_fill_left(" ", 8, 6)(pi)
        '3.141590'
        >>> show_float_fill_left(" ", 8, 3)(-pi)
        '  -3.142'
        >>> show_float_fill_left(" ", 2, 3)(-pi)
        '-3.142'
    """
    pad = PadStyle(filler=filler, width=width)
    fmt = show_float(0, right_digits)
    return lambda x: fill_left(pad.filler, pad.width, fmt(x))
