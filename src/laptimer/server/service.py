"""Serialized access to the engine and fan-out of its events."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from laptimer.engine import TimingEngine
from laptimer.models.events import TimingEvent
from laptimer.models.timing import Gate

logger = logging.getLogger(__name__)

Message = dict[str, Any]


class TimingService:
    """Runs engine calls one at a time and publishes their events.

    Triggers may arrive from HTTP requests and any number of WebSocket
    connections; the lock keeps them in a single ordered stream, and each
    call's events are queued to every subscriber before the next call runs.
    """

    def __init__(self, engine: TimingEngine) -> None:
        self.engine = engine
        self._lock = asyncio.Lock()
        self._subscribers: set[asyncio.Queue[Message]] = set()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self) -> asyncio.Queue[Message]:
        queue: asyncio.Queue[Message] = asyncio.Queue()
        self._subscribers.add(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue[Message]) -> None:
        self._subscribers.discard(queue)

    def initial_data(self) -> Message:
        """Greeting for a new subscriber: roster plus current snapshot."""
        return {
            "event": "initialData",
            "data": {"teams": self.engine.roster.to_wire(), **self.engine.snapshot().to_wire()},
        }

    async def start_session(self, team: str, driver: str) -> list[TimingEvent]:
        return await self._run(self.engine.start_session, team, driver)

    async def stop_session(self) -> list[TimingEvent]:
        return await self._run(self.engine.stop_session)

    async def trigger(self, gate: Gate) -> list[TimingEvent]:
        return await self._run(self.engine.submit_trigger, gate)

    async def _run(self, operation: Callable[..., list[TimingEvent]], *args: Any) -> list[TimingEvent]:
        async with self._lock:
            events = operation(*args)
            self._publish(events)
        return events

    def _publish(self, events: list[TimingEvent]) -> None:
        for event in events:
            message = event.to_message()
            for queue in self._subscribers:
                queue.put_nowait(message)
        if events:
            logger.debug(
                "Published %d event(s) to %d subscriber(s)", len(events), len(self._subscribers)
            )
