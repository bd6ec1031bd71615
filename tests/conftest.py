"""Shared pytest fixtures and test helpers for elapsedctl tests."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from elapsedctl.config.settings import ElapsedSettings

START = datetime(2022, 2, 24, 0, 0, 0)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ELAPSEDCTL_* variables from the host out of every test."""
    for key in list(os.environ):
        if key.startswith("ELAPSEDCTL_"):
            monkeypatch.delenv(key)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to an empty temp dir so no elapsedctl.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path) -> ElapsedSettings:
    """Default settings with no TOML file in play."""
    return ElapsedSettings.from_cli(search_from=tmp_path)


@pytest.fixture
def start() -> datetime:
    """The default configured start instant."""
    return START
