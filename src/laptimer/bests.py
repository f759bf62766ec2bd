"""Personal- and global-best bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, field

from laptimer.models.lap import LapRecord
from laptimer.models.roster import DriverKey
from laptimer.models.standings import GlobalBests
from laptimer.models.timing import Tier

# Category slots: sectors 1-3 use their own number, the full lap uses 0.
LAP = 0
_CATEGORIES = (LAP, 1, 2, 3)


def _beats(duration: int, best: int | None) -> bool:
    return best is None or duration < best


@dataclass
class DriverStats:
    """Personal bests and lap history of one competitor."""

    key: DriverKey
    bests: dict[int, int | None] = field(default_factory=lambda: dict.fromkeys(_CATEGORIES))
    history: list[LapRecord] = field(default_factory=list)

    @property
    def best_lap(self) -> int | None:
        return self.bests[LAP]

    def best_sector(self, sector: int) -> int | None:
        return self.bests[sector]

    @property
    def lap_count(self) -> int:
        return len(self.history)


class BestTimeTracker:
    """Classifies sector and lap times and keeps every best up to date.

    A time is ``GLOBAL_BEST`` when it is strictly faster than anything any
    competitor has set, ``PERSONAL_BEST`` when it equals or beats the
    driver's own best, otherwise ``ORDINARY``. Bests only ever go down.
    """

    def __init__(self) -> None:
        self._global: dict[int, int | None] = dict.fromkeys(_CATEGORIES)
        self._drivers: dict[DriverKey, DriverStats] = {}

    def stats(self, key: DriverKey) -> DriverStats | None:
        return self._drivers.get(key)

    def stats_for(self, key: DriverKey) -> DriverStats:
        """Return the driver's stats, creating them on first use."""
        stats = self._drivers.get(key)
        if stats is None:
            stats = self._drivers[key] = DriverStats(key)
        return stats

    def drivers(self) -> list[DriverStats]:
        return list(self._drivers.values())

    def global_bests(self) -> GlobalBests:
        return GlobalBests(
            sector1=self._global[1],
            sector2=self._global[2],
            sector3=self._global[3],
            lap=self._global[LAP],
        )

    def classify_sector(self, key: DriverKey, sector: int, duration: int) -> Tier:
        if sector not in (1, 2, 3):
            raise ValueError(f"sector must be 1, 2 or 3, got {sector}")
        return self._classify(key, sector, duration)

    def classify_lap(self, key: DriverKey, duration: int) -> Tier:
        return self._classify(key, LAP, duration)

    def record_lap(self, key: DriverKey, record: LapRecord) -> DriverStats:
        """Append a completed lap to the driver's history."""
        stats = self.stats_for(key)
        stats.history.append(record)
        return stats

    def _classify(self, key: DriverKey, category: int, duration: int) -> Tier:
        stats = self.stats_for(key)
        personal = stats.bests[category]

        if _beats(duration, self._global[category]):
            self._global[category] = duration
            tier = Tier.GLOBAL_BEST
        elif personal is None or duration <= personal:
            tier = Tier.PERSONAL_BEST
        else:
            tier = Tier.ORDINARY

        if _beats(duration, personal):
            stats.bests[category] = duration
        return tier
