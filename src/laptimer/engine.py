"""Timing engine: the single entry point for gate triggers and session control."""

from __future__ import annotations

import logging

from laptimer._logging import log_engine_call
from laptimer.bests import BestTimeTracker
from laptimer.clock import Clock, MonotonicClock
from laptimer.exceptions import MalformedSequenceError
from laptimer.lap_state import CompletedLap, LapStateMachine
from laptimer.leaderboard import LeaderboardEngine
from laptimer.models.events import (
    LapComplete,
    LapStarted,
    LeaderboardUpdated,
    SectorComplete,
    TimingEvent,
)
from laptimer.models.lap import LapRecord
from laptimer.models.roster import DriverKey
from laptimer.models.standings import LeaderboardEntry, SectorSplit, SessionSnapshot
from laptimer.models.timing import Gate, LapPhase, Tier
from laptimer.roster import Roster
from laptimer.session import SessionRegistry

logger = logging.getLogger(__name__)


class TimingEngine:
    """Owns all timing state for one process.

    Every inbound operation returns the domain events it produced, in order;
    publishing them is the caller's job. Calls must be serialized: the
    engine is not safe for concurrent use.

    Usage:
        engine = TimingEngine(clock=ManualClock())
        engine.start_session("Ferrari", "Charles Leclerc")
        events = engine.submit_trigger(Gate.GATE0)
    """

    def __init__(self, roster: Roster | None = None, clock: Clock | None = None) -> None:
        self._roster = roster or Roster.default()
        self._clock = clock or MonotonicClock()
        self._laps = LapStateMachine()
        self._session = SessionRegistry(self._roster, self._laps)
        self._bests = BestTimeTracker()
        self._leaderboard = LeaderboardEngine()
        self._current_sectors: list[SectorSplit] = []
        self._last_sectors: tuple[SectorSplit, ...] = ()

    @property
    def roster(self) -> Roster:
        return self._roster

    @property
    def phase(self) -> LapPhase:
        return self._laps.phase

    @property
    def leaderboard(self) -> tuple[LeaderboardEntry, ...]:
        return self._leaderboard.entries

    def active_driver_key(self) -> DriverKey | None:
        return self._session.active_driver_key()

    # ── Inbound operations ─────────────────────────────────────

    @log_engine_call
    def start_session(self, team: str, driver: str) -> list[TimingEvent]:
        """Put a competitor on track. Raises InvalidCompetitorError."""
        event = self._session.start(team, driver)
        self._clear_splits()
        return [event]

    @log_engine_call
    def stop_session(self) -> list[TimingEvent]:
        """Take the competitor off track, discarding any open lap."""
        event = self._session.stop()
        self._clear_splits()
        return [event]

    @log_engine_call
    def submit_trigger(self, gate: Gate, timestamp: int | None = None) -> list[TimingEvent]:
        """Process one gate trigger, stamped now unless ``timestamp`` is given.

        Triggers with no active session, or out of sequence, are dropped and
        produce no events.
        """
        key = self._session.active_driver_key()
        if key is None:
            return []
        if timestamp is None:
            timestamp = self._clock.now_ms()

        try:
            transition = self._laps.advance(gate, timestamp)
        except MalformedSequenceError as exc:
            logger.debug("Dropped trigger for %s: %s", key, exc)
            return []

        events: list[TimingEvent] = []
        if transition.sector is not None:
            sector = transition.sector
            tier = self._bests.classify_sector(key, sector.sector, sector.duration)
            events.append(
                SectorComplete(
                    sector=sector.sector,
                    duration=sector.duration,
                    tier=tier,
                    driver=key.driver,
                    team=key.team,
                )
            )
            self._current_sectors.append(SectorSplit(sector=sector.sector, duration=sector.duration, tier=tier))
        if transition.lap is not None:
            self._last_sectors = tuple(self._current_sectors)
            events.extend(self._finish_lap(key, transition.lap))
        if transition.lap_started is not None:
            self._current_sectors = []
            events.append(LapStarted(team=key.team, driver=key.driver, timestamp=transition.lap_started))
        return events

    def _clear_splits(self) -> None:
        self._current_sectors = []
        self._last_sectors = ()

    def _finish_lap(self, key: DriverKey, lap: CompletedLap) -> list[TimingEvent]:
        tier = self._bests.classify_lap(key, lap.lap_duration)
        record = LapRecord(
            sector1=lap.sector1,
            sector2=lap.sector2,
            sector3=lap.sector3,
            lap_duration=lap.lap_duration,
            completed_at=lap.completed_at,
        )
        stats = self._bests.record_lap(key, record)
        entries = self._leaderboard.update(stats)
        logger.info("Lap complete for %s: %d ms (%s)", key, lap.lap_duration, tier.value)
        return [
            LapComplete(
                driver=key.driver,
                team=key.team,
                sector1=lap.sector1,
                sector2=lap.sector2,
                sector3=lap.sector3,
                lap_duration=lap.lap_duration,
                tier=tier,
                is_personal_best=tier is not Tier.ORDINARY,
                is_global_best=tier is Tier.GLOBAL_BEST,
            ),
            LeaderboardUpdated(entries=entries),
        ]

    # ── Queries ────────────────────────────────────────────────

    def snapshot(self) -> SessionSnapshot:
        """Current state for observers that join mid-session."""
        key = self._session.active_driver_key()
        return SessionSnapshot(
            current_driver=key.driver if key else None,
            current_team=key.team if key else None,
            phase=self._laps.phase,
            leaderboard=self._leaderboard.entries,
            global_best=self._bests.global_bests(),
            current_sectors=tuple(self._current_sectors),
            last_sectors=self._last_sectors,
        )

    def driver_history(self, team: str, driver: str) -> list[LapRecord]:
        """Completed laps of a rostered competitor, oldest first.

        Raises:
            InvalidCompetitorError: the team/driver pair is not on the roster.
        """
        key = self._roster.validate(team, driver)
        stats = self._bests.stats(key)
        return list(stats.history) if stats else []
