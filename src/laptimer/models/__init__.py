"""Lap timer data models."""

from laptimer.models.events import (
    LapComplete,
    LapStarted,
    LeaderboardUpdated,
    SectorComplete,
    SessionStarted,
    SessionStopped,
    TimingEvent,
    parse_event,
)
from laptimer.models.lap import LapRecord
from laptimer.models.roster import DriverKey, Team
from laptimer.models.standings import GlobalBests, LeaderboardEntry, SectorSplit, SessionSnapshot
from laptimer.models.timing import Gate, LapPhase, Tier

__all__ = [
    "DriverKey",
    "Gate",
    "GlobalBests",
    "LapComplete",
    "LapPhase",
    "LapRecord",
    "LapStarted",
    "LeaderboardEntry",
    "LeaderboardUpdated",
    "SectorComplete",
    "SectorSplit",
    "SessionSnapshot",
    "SessionStarted",
    "SessionStopped",
    "Team",
    "Tier",
    "TimingEvent",
    "parse_event",
]
