"""Leaderboard and session snapshot models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import field_serializer, field_validator

from laptimer.models._base import WireModel
from laptimer.models.roster import DriverKey
from laptimer.models.timing import LapPhase, Tier


class LeaderboardEntry(WireModel):
    """Best lap and personal-best sectors of one competitor.

    The sector bests are each the driver's personal best and need not come
    from the same lap as ``best_lap``.
    """

    driver_key: DriverKey
    driver: str
    team: str
    best_lap: int
    sector1: int | None = None
    sector2: int | None = None
    sector3: int | None = None
    laps: int = 0

    @field_validator("driver_key", mode="before")
    @classmethod
    def _parse_driver_key(cls, value: Any) -> Any:
        if isinstance(value, str):
            return DriverKey.from_wire(value)
        return value

    @field_serializer("driver_key")
    def _serialize_driver_key(self, key: DriverKey) -> str:
        return key.to_wire()


class SectorSplit(WireModel):
    """One completed sector of a lap and how it ranked."""

    sector: Literal[1, 2, 3]
    duration: int
    tier: Tier


class GlobalBests(WireModel):
    """Fastest sector and lap times across every competitor timed so far."""

    sector1: int | None = None
    sector2: int | None = None
    sector3: int | None = None
    lap: int | None = None

    def sector(self, number: int) -> int | None:
        return (self.sector1, self.sector2, self.sector3)[number - 1]


class SessionSnapshot(WireModel):
    """Everything a late-joining observer needs to render the current state."""

    current_driver: str | None = None
    current_team: str | None = None
    phase: LapPhase = LapPhase.IDLE
    leaderboard: tuple[LeaderboardEntry, ...] = ()
    global_best: GlobalBests = GlobalBests()
    # completed sectors of the lap in progress, then of the last finished lap
    current_sectors: tuple[SectorSplit, ...] = ()
    last_sectors: tuple[SectorSplit, ...] = ()

    @property
    def is_active(self) -> bool:
        return self.current_driver is not None
