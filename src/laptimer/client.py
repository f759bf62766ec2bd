"""Client classes for a running timing server."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from pydantic import TypeAdapter

from laptimer._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from laptimer.exceptions import LapTimerValidationError
from laptimer.models.lap import LapRecord
from laptimer.models.roster import Team
from laptimer.models.standings import SessionSnapshot
from laptimer.models.timing import Gate


def _validate(model_type: Any, data: Any) -> Any:
    """Validate response data against a model or type expression."""
    try:
        return TypeAdapter(model_type).validate_python(data)
    except Exception as exc:
        name = getattr(model_type, "__name__", str(model_type))
        raise LapTimerValidationError(f"Failed to validate {name} response: {exc}") from exc


def _teams(data: Any) -> list[Team]:
    if not isinstance(data, dict):
        raise LapTimerValidationError(f"Failed to validate teams response: expected object, got {data!r}")
    return _validate(list[Team], [{"name": name, **info} for name, info in data.items()])


def _laps_path(team: str, driver: str) -> str:
    return f"/api/drivers/{quote(team, safe='')}/{quote(driver, safe='')}/laps"


def _sensor(gate: Gate | str) -> str:
    return (gate if isinstance(gate, Gate) else Gate.from_wire(gate)).value


class TimingClient:
    """Synchronous client for the timing server.

    Usage:
        with TimingClient("http://timing.local:3000") as timer:
            timer.start_session("Ferrari", "Charles Leclerc")
            timer.trigger(Gate.GATE0)
            print(timer.session().leaderboard)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> TimingClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    # ── Endpoints ──────────────────────────────────────────────

    def teams(self) -> list[Team]:
        """Get the roster, in server order."""
        return _teams(self._transport.request("GET", "/api/teams"))

    def session(self) -> SessionSnapshot:
        """Get the active competitor, leaderboard and global bests."""
        return _validate(SessionSnapshot, self._transport.request("GET", "/api/session"))

    def start_session(self, team: str, driver: str) -> dict[str, Any]:
        """Put a competitor on track. Unknown competitors raise LapTimerAPIError (400)."""
        return self._transport.request("POST", "/api/start-session", json={"team": team, "driver": driver})

    def stop_session(self) -> dict[str, Any]:
        return self._transport.request("POST", "/api/stop-session")

    def trigger(self, gate: Gate | str) -> int:
        """Send one gate trigger. Returns the number of events it produced."""
        data = self._transport.request("POST", "/api/trigger", json={"sensor": _sensor(gate)})
        return _validate(int, data.get("events", 0))

    def driver_laps(self, team: str, driver: str) -> list[LapRecord]:
        """Get a competitor's completed laps, oldest first."""
        return _validate(list[LapRecord], self._transport.request("GET", _laps_path(team, driver)))


class AsyncTimingClient:
    """Asynchronous client for the timing server.

    Usage:
        async with AsyncTimingClient() as timer:
            snapshot = await timer.session()
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncTimingClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    # ── Endpoints ──────────────────────────────────────────────

    async def teams(self) -> list[Team]:
        return _teams(await self._transport.request("GET", "/api/teams"))

    async def session(self) -> SessionSnapshot:
        return _validate(SessionSnapshot, await self._transport.request("GET", "/api/session"))

    async def start_session(self, team: str, driver: str) -> dict[str, Any]:
        return await self._transport.request(
            "POST", "/api/start-session", json={"team": team, "driver": driver}
        )

    async def stop_session(self) -> dict[str, Any]:
        return await self._transport.request("POST", "/api/stop-session")

    async def trigger(self, gate: Gate | str) -> int:
        data = await self._transport.request("POST", "/api/trigger", json={"sensor": _sensor(gate)})
        return _validate(int, data.get("events", 0))

    async def driver_laps(self, team: str, driver: str) -> list[LapRecord]:
        return _validate(list[LapRecord], await self._transport.request("GET", _laps_path(team, driver)))
