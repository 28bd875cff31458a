"""Tests for fill_left / fill_right and the padded show wrappers."""

import pytest
from pydantic import ValidationError

from showplus import fill_left, fill_right, show_fill_left, show_fill_right
from showplus.domain.styles import PadStyle
from showplus.render.padding import padder


class TestFillLeft:
    def test_pads_short_text(self) -> None:
        assert fill_left("0", 4, "3") == "0003"

    def test_long_text_unchanged(self) -> None:
        assert fill_left(" ", 2, "12345") == "12345"

    def test_exact_width_unchanged(self) -> None:
        assert fill_left("*", 3, "abc") == "abc"

    def test_zero_width(self) -> None:
        assert fill_left("*", 0, "") == ""

    @pytest.mark.parametrize("text", ["", "a", "abcd", "abcdefgh"])
    def test_length_is_max_of_width_and_text(self, text: str) -> None:
        out = fill_left("-", 5, text)
        assert len(out) == max(5, len(text))
        if len(text) < 5:
            assert out[: 5 - len(text)] == "-" * (5 - len(text))
            assert out.endswith(text)

    @pytest.mark.parametrize("text", ["", "x", "12345", "123456"])
    def test_idempotent(self, text: str) -> None:
        once = fill_left(".", 5, text)
        assert fill_left(".", 5, once) == once

    def test_counts_code_points(self) -> None:
        assert fill_left(" ", 3, "é") == "  é"


class TestFillRight:
    def test_pads_short_text(self) -> None:
        assert fill_right(" ", 4, "3") == "3   "

    def test_long_text_unchanged(self) -> None:
        assert fill_right(" ", 4, "12345") == "12345"

    def test_idempotent(self) -> None:
        once = fill_right("_", 6, "ab")
        assert fill_right("_", 6, once) == once == "ab____"


class TestShowFill:
    def test_show_fill_left_int(self) -> None:
        assert show_fill_left(" ", 4)(3) == "   3"
        assert show_fill_left("0", 4)(3) == "0003"
        assert show_fill_left(" ", 4)(12345) == "12345"

    def test_show_fill_right_int(self) -> None:
        assert show_fill_right(" ", 4)(3) == "3   "
        assert show_fill_right(" ", 4)(12345) == "12345"

    def test_uses_show_dispatch(self) -> None:
        assert show_fill_left(".", 8)((1, "a")) == "..(1, a)"

    def test_formatter_is_reusable(self) -> None:
        fmt = show_fill_left("0", 3)
        assert [fmt(n) for n in (1, 22, 333, 4444)] == ["001", "022", "333", "4444"]

    def test_rejects_multi_char_filler(self) -> None:
        with pytest.raises(ValidationError):
            show_fill_left("ab", 4)

    def test_rejects_negative_width(self) -> None:
        with pytest.raises(ValidationError):
            show_fill_right(" ", -1)


class TestPadder:
    def test_left_side(self) -> None:
        assert padder(PadStyle(filler="0", width=3))(7) == "007"

    def test_right_side(self) -> None:
        assert padder(PadStyle(filler=".", width=3, side="right"))(7) == "7.."
