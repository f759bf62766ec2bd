"""Tests for the best-lap leaderboard."""

from __future__ import annotations

import pytest

from laptimer.bests import LAP, DriverStats
from laptimer.leaderboard import LeaderboardEngine, entry_from_stats
from laptimer.models.lap import LapRecord
from laptimer.models.roster import DriverKey


def _stats(team: str, driver: str, best_lap: int, laps: int = 1) -> DriverStats:
    stats = DriverStats(DriverKey(team, driver))
    stats.bests.update({LAP: best_lap, 1: best_lap // 3, 2: best_lap // 3, 3: best_lap // 3})
    record = LapRecord(
        sector1=best_lap // 3,
        sector2=best_lap // 3,
        sector3=best_lap - 2 * (best_lap // 3),
        lap_duration=best_lap,
        completed_at=0,
    )
    stats.history.extend([record] * laps)
    return stats


@pytest.fixture
def board() -> LeaderboardEngine:
    return LeaderboardEngine()


class TestEntryFromStats:
    def test_uses_personal_bests(self) -> None:
        stats = _stats("Ferrari", "Charles Leclerc", 95000, laps=3)
        stats.bests[2] = 34000
        entry = entry_from_stats(stats)
        assert entry.best_lap == 95000
        assert entry.sector2 == 34000
        assert entry.laps == 3
        assert entry.driver == "Charles Leclerc"
        assert entry.team == "Ferrari"

    def test_requires_completed_lap(self) -> None:
        with pytest.raises(ValueError):
            entry_from_stats(DriverStats(DriverKey("Ferrari", "Charles Leclerc")))


class TestLeaderboardEngine:
    def test_sorted_ascending(self, board) -> None:
        board.update(_stats("Ferrari", "Charles Leclerc", 95000))
        board.update(_stats("McLaren", "Lando Norris", 93000))
        board.update(_stats("Haas", "Kevin Magnussen", 99000))
        assert [e.best_lap for e in board.entries] == [93000, 95000, 99000]
        assert board.position(DriverKey("McLaren", "Lando Norris")) == 1

    def test_upsert_keeps_one_entry_per_driver(self, board) -> None:
        board.update(_stats("Ferrari", "Charles Leclerc", 95000))
        board.update(_stats("Ferrari", "Charles Leclerc", 94000, laps=2))
        assert len(board) == 1
        assert board.entries[0].best_lap == 94000
        assert board.entries[0].laps == 2

    def test_tie_ranks_first_to_reach(self, board) -> None:
        board.update(_stats("Ferrari", "Charles Leclerc", 96000))
        board.update(_stats("McLaren", "Lando Norris", 95000))
        # Leclerc was inserted first but reaches 95000 second
        board.update(_stats("Ferrari", "Charles Leclerc", 95000, laps=2))
        assert [e.driver for e in board.entries] == ["Lando Norris", "Charles Leclerc"]

    def test_unchanged_best_keeps_tie_position(self, board) -> None:
        board.update(_stats("Ferrari", "Charles Leclerc", 95000))
        board.update(_stats("McLaren", "Lando Norris", 95000))
        board.update(_stats("Ferrari", "Charles Leclerc", 95000, laps=2))
        assert [e.driver for e in board.entries] == ["Charles Leclerc", "Lando Norris"]
        assert board.entries[0].laps == 2

    def test_position_of_unranked_driver(self, board) -> None:
        assert board.position(DriverKey("Haas", "Kevin Magnussen")) is None

    def test_clear(self, board) -> None:
        board.update(_stats("Ferrari", "Charles Leclerc", 95000))
        board.clear()
        assert board.entries == ()
