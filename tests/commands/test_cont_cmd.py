"""Tests for the cont CLI command."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from click.testing import CliRunner

from showplus.cli import cli


class TestContCommand:
    def test_default_frame(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["cont", "1", "2", "3"])
        assert result.exit_code == 0
        assert result.stdout == "[1, 2, 3]\n"

    def test_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["cont"])
        assert result.stdout == "[]\n"

    def test_custom_frame(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["cont", "a", "b", "--sep", " => ", "--prefix", "{", "--suffix", "}"]
        )
        assert result.stdout == "{a => b}\n"

    def test_wrapping(self, cli_runner: CliRunner) -> None:
        args = ["cont", "1", "2", "3", "4", "5", "--sep", ",", "--prefix", "(", "--suffix", ")"]
        result = cli_runner.invoke(cli, [*args, "--every", "2"])
        assert result.exit_code == 0
        assert result.stdout == "(1,2,\n 3,4,\n 5)\n"

    def test_frame_from_config(
        self, cli_runner: CliRunner, write_config: Callable[[str], Path]
    ) -> None:
        write_config('[frame]\nseparator = "; "\nprefix = "<"\nsuffix = ">"\n')
        result = cli_runner.invoke(cli, ["cont", "x", "y"])
        assert result.stdout == "<x; y>\n"

    def test_negative_every_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["cont", "1", "--every", "-1"])
        assert result.exit_code == 2
