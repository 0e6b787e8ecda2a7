"""Shared pytest fixtures for rosterq tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from rosterq.domain.employee import Employee
from rosterq.domain.roster import Roster
from rosterq.domain.types import PositionType
from rosterq.infrastructure.sample import build_sample_roster
from rosterq.services.telemetry import _active, disable_telemetry


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    rosterq_level = logging.getLogger("rosterq").level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    logging.getLogger("rosterq").setLevel(rosterq_level)
    disable_telemetry()
    _active.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no ROSTERQ_* overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` on command test
    classes so a stray ``rosterq.toml`` never leaks into CLI runs.
    """
    monkeypatch.delenv("ROSTERQ_CONFIG", raising=False)
    monkeypatch.delenv("ROSTERQ_ENGINE__EFFICIENCY_THRESHOLD", raising=False)
    monkeypatch.delenv("ROSTERQ_ENGINE__PAGE_SIZE", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sequential_employees() -> list[Employee]:
    """Six distinct employees, Name1..Name6, rated 11..16."""
    return [
        Employee(id=i, name=f"Name{i}", rating=10 + i, position_type=PositionType.DEVELOPER)
        for i in range(1, 7)
    ]


@pytest.fixture
def roster() -> Roster:
    """The bundled demonstration roster."""
    return build_sample_roster()
