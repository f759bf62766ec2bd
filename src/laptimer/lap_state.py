"""Per-session lap state machine.

Turns the ordered stream of gate triggers for the active competitor into
sector and lap boundaries::

    IDLE --GATE0--> IN_SECTOR_1 --GATE1--> IN_SECTOR_2 --GATE2--> IN_SECTOR_3
                         ^                                             |
                         +---------------------GATE0-------------------+

A GATE0 that completes a lap also starts the next one at the same instant.
Any trigger with no transition from the current phase raises
``MalformedSequenceError`` and leaves the state untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from laptimer.exceptions import MalformedSequenceError
from laptimer.models.timing import Gate, LapPhase


@dataclass(frozen=True)
class LapState:
    """Timestamps and partial durations of the lap in progress."""

    lap_start: int | None = None
    sector1_start: int | None = None
    sector2_start: int | None = None
    sector3_start: int | None = None
    sector1: int | None = None
    sector2: int | None = None

    @property
    def phase(self) -> LapPhase:
        if self.sector3_start is not None:
            return LapPhase.IN_SECTOR_3
        if self.sector2_start is not None:
            return LapPhase.IN_SECTOR_2
        if self.sector1_start is not None:
            return LapPhase.IN_SECTOR_1
        return LapPhase.IDLE

    @property
    def last_boundary(self) -> int | None:
        for stamp in (self.sector3_start, self.sector2_start, self.sector1_start):
            if stamp is not None:
                return stamp
        return None

    @classmethod
    def started_at(cls, timestamp: int) -> LapState:
        return cls(lap_start=timestamp, sector1_start=timestamp)


@dataclass(frozen=True)
class SectorTime:
    sector: int
    duration: int


@dataclass(frozen=True)
class CompletedLap:
    sector1: int
    sector2: int
    sector3: int
    lap_duration: int
    completed_at: int


@dataclass(frozen=True)
class Transition:
    """What one accepted trigger did.

    ``sector`` is set when a sector finished, ``lap`` when the lap finished,
    and ``lap_started`` when a new lap began (after any completion).
    """

    sector: SectorTime | None = None
    lap: CompletedLap | None = None
    lap_started: int | None = None


class LapStateMachine:
    """Tracks where the active competitor is on the current lap."""

    def __init__(self) -> None:
        self._state = LapState()

    @property
    def state(self) -> LapState:
        return self._state

    @property
    def phase(self) -> LapPhase:
        return self._state.phase

    def reset(self) -> None:
        """Discard any lap in progress."""
        self._state = LapState()

    def advance(self, gate: Gate, timestamp: int) -> Transition:
        """Apply one trigger.

        Raises:
            MalformedSequenceError: the trigger has no transition from the
                current phase, or its timestamp precedes the last boundary.
        """
        state = self._state
        phase = state.phase

        last = state.last_boundary
        if last is not None and timestamp < last:
            raise MalformedSequenceError(
                gate.name, phase.value, f"timestamp {timestamp} precedes boundary {last}"
            )

        if gate is Gate.GATE0:
            if phase is LapPhase.IDLE:
                self._state = LapState.started_at(timestamp)
                return Transition(lap_started=timestamp)
            if phase is LapPhase.IN_SECTOR_3:
                return self._complete_lap(timestamp)
            raise MalformedSequenceError(gate.name, phase.value, "sector 3 was never started")

        if gate is Gate.GATE1 and phase is LapPhase.IN_SECTOR_1:
            duration = timestamp - state.sector1_start
            self._state = replace(state, sector1=duration, sector2_start=timestamp)
            return Transition(sector=SectorTime(1, duration))

        if gate is Gate.GATE2 and phase is LapPhase.IN_SECTOR_2:
            duration = timestamp - state.sector2_start
            self._state = replace(state, sector2=duration, sector3_start=timestamp)
            return Transition(sector=SectorTime(2, duration))

        raise MalformedSequenceError(gate.name, phase.value)

    def _complete_lap(self, timestamp: int) -> Transition:
        state = self._state
        sector3 = timestamp - state.sector3_start
        lap = CompletedLap(
            sector1=state.sector1,
            sector2=state.sector2,
            sector3=sector3,
            lap_duration=timestamp - state.lap_start,
            completed_at=timestamp,
        )
        # back-to-back lapping: the finish line crossing starts the next lap
        self._state = LapState.started_at(timestamp)
        return Transition(sector=SectorTime(3, sector3), lap=lap, lap_started=timestamp)
