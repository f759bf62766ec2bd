"""Tests for the timing server client classes."""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from laptimer import AsyncTimingClient, Gate, TimingClient
from laptimer.exceptions import LapTimerAPIError, LapTimerValidationError
from laptimer.models import LapRecord, SessionSnapshot, Team
from tests.conftest import SAMPLE_LAP, SAMPLE_SESSION, SAMPLE_TEAMS

BASE_URL = "http://localhost:3000"


class TestTimingClient:
    @respx.mock
    def test_teams(self) -> None:
        respx.get(f"{BASE_URL}/api/teams").mock(
            return_value=httpx.Response(200, json=SAMPLE_TEAMS)
        )
        with TimingClient() as timer:
            teams = timer.teams()
        assert [t.name for t in teams] == ["Ferrari", "McLaren"]
        assert isinstance(teams[0], Team)
        assert teams[1].drivers == ("Lando Norris", "Oscar Piastri")

    @respx.mock
    def test_session(self) -> None:
        respx.get(f"{BASE_URL}/api/session").mock(
            return_value=httpx.Response(200, json=SAMPLE_SESSION)
        )
        with TimingClient() as timer:
            snapshot = timer.session()
        assert isinstance(snapshot, SessionSnapshot)
        assert snapshot.current_driver == "Charles Leclerc"
        assert snapshot.leaderboard[0].best_lap == 95000

    @respx.mock
    def test_start_session_sends_body(self) -> None:
        route = respx.post(f"{BASE_URL}/api/start-session").mock(
            return_value=httpx.Response(
                200, json={"success": True, "driver": "Charles Leclerc", "team": "Ferrari"}
            )
        )
        with TimingClient() as timer:
            result = timer.start_session("Ferrari", "Charles Leclerc")
        assert result["success"] is True
        assert json.loads(route.calls.last.request.content) == {
            "team": "Ferrari",
            "driver": "Charles Leclerc",
        }

    @respx.mock
    def test_start_session_invalid(self) -> None:
        respx.post(f"{BASE_URL}/api/start-session").mock(
            return_value=httpx.Response(400, json={"detail": "Invalid team or driver"})
        )
        with TimingClient() as timer:
            with pytest.raises(LapTimerAPIError) as exc_info:
                timer.start_session("Ferrari", "Lando Norris")
        assert exc_info.value.status_code == 400

    @respx.mock
    def test_stop_session(self) -> None:
        respx.post(f"{BASE_URL}/api/stop-session").mock(
            return_value=httpx.Response(200, json={"success": True})
        )
        with TimingClient() as timer:
            assert timer.stop_session() == {"success": True}

    @respx.mock
    @pytest.mark.parametrize("gate, sensor", [(Gate.GATE0, "S1"), ("s3", "S3")])
    def test_trigger(self, gate, sensor) -> None:
        route = respx.post(f"{BASE_URL}/api/trigger").mock(
            return_value=httpx.Response(200, json={"success": True, "events": 4})
        )
        with TimingClient() as timer:
            assert timer.trigger(gate) == 4
        assert json.loads(route.calls.last.request.content) == {"sensor": sensor}

    def test_trigger_unknown_sensor(self) -> None:
        with TimingClient() as timer:
            with pytest.raises(ValueError):
                timer.trigger("S5")

    @respx.mock
    def test_driver_laps_quotes_names(self) -> None:
        route = respx.get(f"{BASE_URL}/api/drivers/Red%20Bull%20Racing/Max%20Verstappen/laps").mock(
            return_value=httpx.Response(200, json=[SAMPLE_LAP])
        )
        with TimingClient() as timer:
            laps = timer.driver_laps("Red Bull Racing", "Max Verstappen")
        assert route.called
        assert laps == [LapRecord.model_validate(SAMPLE_LAP)]

    @respx.mock
    def test_validation_error(self) -> None:
        respx.get(f"{BASE_URL}/api/session").mock(
            return_value=httpx.Response(200, json={"phase": "pit-lane"})
        )
        with TimingClient() as timer:
            with pytest.raises(LapTimerValidationError):
                timer.session()

    @respx.mock
    def test_teams_not_an_object(self) -> None:
        respx.get(f"{BASE_URL}/api/teams").mock(return_value=httpx.Response(200, json=[]))
        with TimingClient() as timer:
            with pytest.raises(LapTimerValidationError):
                timer.teams()

    @respx.mock
    def test_custom_base_url(self) -> None:
        respx.get("http://gates.local:8000/api/session").mock(
            return_value=httpx.Response(200, json=SAMPLE_SESSION)
        )
        with TimingClient(base_url="http://gates.local:8000") as timer:
            assert timer.session().current_team == "Ferrari"


class TestAsyncTimingClient:
    @respx.mock
    @pytest.mark.asyncio
    async def test_session(self) -> None:
        respx.get(f"{BASE_URL}/api/session").mock(
            return_value=httpx.Response(200, json=SAMPLE_SESSION)
        )
        async with AsyncTimingClient() as timer:
            snapshot = await timer.session()
        assert snapshot.global_best.lap == 95000

    @respx.mock
    @pytest.mark.asyncio
    async def test_teams(self) -> None:
        respx.get(f"{BASE_URL}/api/teams").mock(
            return_value=httpx.Response(200, json=SAMPLE_TEAMS)
        )
        async with AsyncTimingClient() as timer:
            teams = await timer.teams()
        assert teams[0].color == "#E8002D"

    @respx.mock
    @pytest.mark.asyncio
    async def test_trigger_and_laps(self) -> None:
        respx.post(f"{BASE_URL}/api/trigger").mock(
            return_value=httpx.Response(200, json={"success": True, "events": 1})
        )
        respx.get(f"{BASE_URL}/api/drivers/Ferrari/Charles%20Leclerc/laps").mock(
            return_value=httpx.Response(200, json=[])
        )
        async with AsyncTimingClient() as timer:
            assert await timer.trigger(Gate.GATE1) == 1
            assert await timer.driver_laps("Ferrari", "Charles Leclerc") == []

    @respx.mock
    @pytest.mark.asyncio
    async def test_start_and_stop(self) -> None:
        respx.post(f"{BASE_URL}/api/start-session").mock(
            return_value=httpx.Response(200, json={"success": True, "driver": "Lando Norris", "team": "McLaren"})
        )
        respx.post(f"{BASE_URL}/api/stop-session").mock(
            return_value=httpx.Response(200, json={"success": True})
        )
        async with AsyncTimingClient() as timer:
            assert (await timer.start_session("McLaren", "Lando Norris"))["team"] == "McLaren"
            assert (await timer.stop_session())["success"] is True
