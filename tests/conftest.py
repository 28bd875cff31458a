"""Shared pytest fixtures for showplus tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no SHOWPLUS_* env vars.

    Keeps a stray showplus.toml above the checkout from leaking into tests.
    """
    for var in ("SHOWPLUS_CONFIG", "SHOWPLUS_VERBOSE", "SHOWPLUS_LOG_JSON"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    show_logger = logging.getLogger("showplus")
    show_level = show_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    show_logger.setLevel(show_level)


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a showplus.toml into the working directory and return its path."""

    def _write(body: str) -> Path:
        path = tmp_path / "showplus.toml"
        path.write_text(body, encoding="utf-8")
        return path

    return _write
