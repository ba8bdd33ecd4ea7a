"""Shared pytest fixtures for tripview tests."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from tripview.config.settings import TripviewSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config env vars.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` so walk-up config
    discovery never finds a tripview.toml outside the test.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TRIPVIEW_CONFIG", raising=False)
    monkeypatch.delenv("TRIPVIEW_DISPLAY__TIMEZONE", raising=False)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> TripviewSettings:
    """Default settings with no config file in reach."""
    monkeypatch.delenv("TRIPVIEW_CONFIG", raising=False)
    return TripviewSettings.from_cli(start=tmp_path)


@pytest.fixture
def departure() -> datetime:
    """A fixed naive departure instant: 5 June 2024, 10:00."""
    return datetime(2024, 6, 5, 10, 0)
