"""Active-competitor session lifecycle."""

from __future__ import annotations

import logging

from laptimer.lap_state import LapStateMachine
from laptimer.models.events import SessionStarted, SessionStopped
from laptimer.models.roster import DriverKey
from laptimer.models.timing import LapPhase
from laptimer.roster import Roster

logger = logging.getLogger(__name__)


class SessionRegistry:
    """Holds the single competitor currently on track and their lap state.

    While no session is active every gate trigger is a no-op.
    """

    def __init__(self, roster: Roster, laps: LapStateMachine | None = None) -> None:
        self._roster = roster
        self._laps = laps or LapStateMachine()
        self._active: DriverKey | None = None

    @property
    def laps(self) -> LapStateMachine:
        return self._laps

    @property
    def is_active(self) -> bool:
        return self._active is not None

    def active_driver_key(self) -> DriverKey | None:
        return self._active

    def start(self, team: str, driver: str) -> SessionStarted:
        """Put a competitor on track, replacing whoever was there.

        Any lap in progress is discarded without a lap-complete event.

        Raises:
            InvalidCompetitorError: the team/driver pair is not on the roster.
        """
        key = self._roster.validate(team, driver)
        if self._active is not None and self._laps.phase is not LapPhase.IDLE:
            logger.info("Discarding open lap of %s", self._active)
        self._active = key
        self._laps.reset()
        logger.info("Session started for %s", key)
        return SessionStarted(team=key.team, driver=key.driver)

    def stop(self) -> SessionStopped:
        """Clear the active competitor and any open lap."""
        if self._active is not None:
            logger.info("Session stopped for %s", self._active)
        self._active = None
        self._laps.reset()
        return SessionStopped()
