"""Outbound domain events produced by the timing engine.

Every inbound operation returns its events as an ordered list; the transport
layer publishes them as ``{"event": <name>, "data": <payload>}`` messages.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import Field, TypeAdapter

from laptimer.models._base import WireModel
from laptimer.models.standings import LeaderboardEntry
from laptimer.models.timing import Tier


class TimingEvent(WireModel):
    """Base class for all outbound events."""

    event: str

    def to_message(self) -> dict[str, Any]:
        """Wrap the payload in the ``{"event", "data"}`` envelope."""
        payload = self.to_wire()
        name = payload.pop("event")
        return {"event": name, "data": payload}


class SessionStarted(TimingEvent):
    event: Literal["sessionStarted"] = "sessionStarted"
    team: str
    driver: str


class SessionStopped(TimingEvent):
    event: Literal["sessionStopped"] = "sessionStopped"


class LapStarted(TimingEvent):
    event: Literal["lapStarted"] = "lapStarted"
    team: str
    driver: str
    timestamp: int


class SectorComplete(TimingEvent):
    event: Literal["sectorComplete"] = "sectorComplete"
    sector: Literal[1, 2, 3]
    duration: int
    tier: Tier
    driver: str
    team: str


class LapComplete(TimingEvent):
    event: Literal["lapComplete"] = "lapComplete"
    driver: str
    team: str
    sector1: int
    sector2: int
    sector3: int
    lap_duration: int
    tier: Tier
    is_personal_best: bool
    is_global_best: bool


class LeaderboardUpdated(TimingEvent):
    event: Literal["leaderboardUpdated"] = "leaderboardUpdated"
    entries: tuple[LeaderboardEntry, ...]


AnyEvent = Annotated[
    Union[SessionStarted, SessionStopped, LapStarted, SectorComplete, LapComplete, LeaderboardUpdated],
    Field(discriminator="event"),
]

_event_adapter: TypeAdapter[AnyEvent] = TypeAdapter(AnyEvent)


def parse_event(message: dict[str, Any]) -> TimingEvent:
    """Rebuild a typed event from a ``{"event", "data"}`` message."""
    return _event_adapter.validate_python({"event": message["event"], **message.get("data", {})})
