"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# ── Mock streamlit before any dashboard imports ──────────────────────────────

_mock_st = MagicMock()
_mock_st.cache_data = lambda **kw: (lambda fn: fn)  # passthrough decorator
_mock_st.cache_resource = lambda **kw: (lambda fn: fn)  # passthrough decorator
sys.modules.setdefault("streamlit", _mock_st)

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)


# ── Sample data fixtures ─────────────────────────────────────────────────────


def _make_entry(
    driver: str,
    team: str,
    best_lap: int,
    s1: int | None = 30000,
    s2: int | None = 35000,
    s3: int | None = 30000,
    laps: int = 1,
) -> dict:
    return {
        "driverKey": json.dumps([team, driver]),
        "driver": driver,
        "team": team,
        "bestLap": best_lap,
        "sector1": s1,
        "sector2": s2,
        "sector3": s3,
        "laps": laps,
    }


@pytest.fixture
def sample_teams() -> dict[str, dict]:
    return {
        "Ferrari": {"color": "#E8002D", "drivers": ["Charles Leclerc", "Carlos Sainz"]},
        "McLaren": {"color": "#FF8000", "drivers": ["Lando Norris", "Oscar Piastri"]},
        "Haas": {"color": "", "drivers": ["Nico Hulkenberg", "Kevin Magnussen"]},
    }


@pytest.fixture
def sample_entries() -> list[dict]:
    return [
        _make_entry("Lando Norris", "McLaren", 93000, 29000, 34000, 30000, laps=2),
        _make_entry("Charles Leclerc", "Ferrari", 95000),
        _make_entry("Nico Hulkenberg", "Haas", 101250, 32000, 37000, 32250, laps=4),
    ]
