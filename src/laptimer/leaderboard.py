"""Best-lap leaderboard."""

from __future__ import annotations

from laptimer.bests import DriverStats
from laptimer.models.roster import DriverKey
from laptimer.models.standings import LeaderboardEntry


def entry_from_stats(stats: DriverStats) -> LeaderboardEntry:
    """Build a leaderboard entry from a driver's current personal bests."""
    if stats.best_lap is None:
        raise ValueError(f"{stats.key} has no completed lap")
    return LeaderboardEntry(
        driver_key=stats.key,
        driver=stats.key.driver,
        team=stats.key.team,
        best_lap=stats.best_lap,
        sector1=stats.best_sector(1),
        sector2=stats.best_sector(2),
        sector3=stats.best_sector(3),
        laps=stats.lap_count,
    )


class LeaderboardEngine:
    """One entry per driver with a completed lap, fastest best lap first.

    Equal best laps rank in the order they were first reached.
    """

    def __init__(self) -> None:
        self._entries: list[LeaderboardEntry] = []

    @property
    def entries(self) -> tuple[LeaderboardEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def position(self, key: DriverKey) -> int | None:
        """1-based position of a driver, or None if not ranked."""
        for index, entry in enumerate(self._entries):
            if entry.driver_key == key:
                return index + 1
        return None

    def update(self, stats: DriverStats) -> tuple[LeaderboardEntry, ...]:
        """Upsert the driver's entry and re-sort. Returns the new order."""
        entry = entry_from_stats(stats)
        index = next(
            (i for i, existing in enumerate(self._entries) if existing.driver_key == entry.driver_key),
            None,
        )
        if index is None:
            self._entries.append(entry)
        elif self._entries[index].best_lap == entry.best_lap:
            self._entries[index] = entry
        else:
            # a new best time queues behind drivers who already hold it
            del self._entries[index]
            self._entries.append(entry)

        self._entries.sort(key=lambda e: e.best_lap)
        return self.entries

    def clear(self) -> None:
        self._entries.clear()
