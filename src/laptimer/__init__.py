"""Gate Lap Timer: sector and lap timing from three timing gates."""

from laptimer.clock import ManualClock, MonotonicClock
from laptimer.client import AsyncTimingClient, TimingClient
from laptimer.engine import TimingEngine
from laptimer.exceptions import (
    InvalidCompetitorError,
    LapTimerAPIError,
    LapTimerConnectionError,
    LapTimerError,
    LapTimerTimeoutError,
    LapTimerValidationError,
    MalformedSequenceError,
    RosterError,
)
from laptimer.models.timing import Gate, LapPhase, Tier
from laptimer.roster import Roster

__all__ = [
    "AsyncTimingClient",
    "Gate",
    "InvalidCompetitorError",
    "LapPhase",
    "LapTimerAPIError",
    "LapTimerConnectionError",
    "LapTimerError",
    "LapTimerTimeoutError",
    "LapTimerValidationError",
    "MalformedSequenceError",
    "ManualClock",
    "MonotonicClock",
    "Roster",
    "Tier",
    "TimingClient",
    "TimingEngine",
]

__version__ = "0.1.0"
