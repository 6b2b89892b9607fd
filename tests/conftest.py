"""Shared pytest fixtures and test helpers for rafall tests."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Generator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from rafall.domain.metadata import Metadata

TESTDATA = Path(__file__).parent / "testdata"

BRT = timezone(timedelta(hours=-3))


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None]:
    """Drop handlers the CLI installs so later tests never log to a closed stream."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    yield
    root.handlers = handlers
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """Copy of ``testdata/sampleproject`` in a temp dir.

    Layout: ``etc/rafall.conf`` plus ``src/`` holding two posts, the three
    template files, and a non-HTML file.
    """
    root = tmp_path / "site"
    shutil.copytree(TESTDATA / "sampleproject", root)
    return root


@pytest.fixture
def _in_sample_project(sample_project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the sample project so the CLI finds its defaults."""
    monkeypatch.chdir(sample_project)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def get_content(filename: str) -> bytes:
    """Read a fixture file from ``tests/testdata``."""
    return (TESTDATA / filename).read_bytes()


def brt(year: int, month: int, day: int, hour: int, minute: int) -> datetime:
    """A datetime in the fixed -03:00 zone used throughout the fixtures."""
    return datetime(year, month, day, hour, minute, tzinfo=BRT)


def make_meta(title: str, when: datetime | str, *tags: str) -> Metadata:
    """Build Metadata through the same validation path as decoded JSON."""
    return Metadata.model_validate({"Title": title, "Date": when, "Tags": list(tags)})
