"""Custom exceptions for the lap timer."""

from __future__ import annotations


class LapTimerError(Exception):
    """Base exception for all lap timer errors."""


class InvalidCompetitorError(LapTimerError):
    """Raised when a session is started for an unknown team or driver."""

    def __init__(self, team: str, driver: str) -> None:
        self.team = team
        self.driver = driver
        super().__init__(f"Invalid team or driver: {driver!r} ({team!r})")


class MalformedSequenceError(LapTimerError):
    """Raised when a gate trigger arrives out of the expected order.

    Only the lap state machine raises this; the engine drops the trigger.
    """

    def __init__(self, gate: str, phase: str, reason: str = "") -> None:
        self.gate = gate
        self.phase = phase
        message = f"{gate} not accepted in {phase}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class RosterError(LapTimerError):
    """Raised when a roster file cannot be loaded."""


class LapTimerConnectionError(LapTimerError):
    """Raised when the client cannot connect to the timing server."""


class LapTimerTimeoutError(LapTimerError):
    """Raised when a request to the timing server times out."""


class LapTimerAPIError(LapTimerError):
    """Raised when the timing server returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class LapTimerValidationError(LapTimerError):
    """Raised when server response data fails model validation."""
