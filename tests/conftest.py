"""Shared test fixtures and sample server payloads."""

from __future__ import annotations

import pytest

import laptimer._logging as call_logging
from laptimer import Gate, ManualClock, TimingEngine
from laptimer.models.events import TimingEvent

BASE_URL = "http://localhost:3000"


SAMPLE_TEAMS = {
    "Ferrari": {"color": "#E8002D", "drivers": ["Charles Leclerc", "Carlos Sainz"]},
    "McLaren": {"color": "#FF8000", "drivers": ["Lando Norris", "Oscar Piastri"]},
}

SAMPLE_ENTRY = {
    "driverKey": '["Ferrari", "Charles Leclerc"]',
    "driver": "Charles Leclerc",
    "team": "Ferrari",
    "bestLap": 95000,
    "sector1": 30000,
    "sector2": 35000,
    "sector3": 30000,
    "laps": 1,
}

SAMPLE_SESSION = {
    "currentDriver": "Charles Leclerc",
    "currentTeam": "Ferrari",
    "phase": "inSector1",
    "leaderboard": [SAMPLE_ENTRY],
    "globalBest": {"sector1": 30000, "sector2": 35000, "sector3": 30000, "lap": 95000},
    "currentSectors": [],
    "lastSectors": [
        {"sector": 1, "duration": 30000, "tier": "globalBest"},
        {"sector": 2, "duration": 35000, "tier": "globalBest"},
        {"sector": 3, "duration": 30000, "tier": "globalBest"},
    ],
}

SAMPLE_LAP = {
    "sector1": 30000,
    "sector2": 35000,
    "sector3": 30000,
    "lapDuration": 95000,
    "completedAt": 95000,
}


def run_lap(
    engine: TimingEngine, start: int, s1: int, s2: int, s3: int
) -> list[TimingEvent]:
    """Feed GATE1, GATE2, GATE0 for a lap that began at ``start``.

    The lap must already be open (a GATE0 at ``start``). Returns the events of
    the closing GATE0.
    """
    engine.submit_trigger(Gate.GATE1, start + s1)
    engine.submit_trigger(Gate.GATE2, start + s1 + s2)
    return engine.submit_trigger(Gate.GATE0, start + s1 + s2 + s3)


@pytest.fixture(autouse=True)
def _call_log_to_tmp(tmp_path):
    """Attach the call log under tmp_path for the duration of a test."""
    call_logging.set_log_dir(tmp_path / "logs")
    yield tmp_path / "logs"
    call_logging.set_log_dir(None)


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def engine(clock: ManualClock) -> TimingEngine:
    return TimingEngine(clock=clock)


@pytest.fixture
def leclerc(engine: TimingEngine) -> TimingEngine:
    """Engine with Charles Leclerc on track and no lap open."""
    engine.start_session("Ferrari", "Charles Leclerc")
    return engine
