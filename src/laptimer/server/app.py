"""FastAPI application entry point."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated, Any

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from laptimer._logging import set_log_dir
from laptimer.config import Settings
from laptimer.engine import TimingEngine
from laptimer.exceptions import InvalidCompetitorError
from laptimer.roster import Roster
from laptimer.server.schemas import StartSessionRequest, TriggerRequest
from laptimer.server.service import Message, TimingService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_timing(request: Request) -> TimingService:
    return request.app.state.timing  # type: ignore[no-any-return]


Timing = Annotated[TimingService, Depends(get_timing)]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/api/teams")
async def list_teams(timing: Timing) -> dict[str, dict[str, Any]]:
    return timing.engine.roster.to_wire()


@router.get("/api/session")
async def current_session(timing: Timing) -> dict[str, Any]:
    """Active competitor, lap phase, leaderboard and global bests."""
    return timing.engine.snapshot().to_wire()


@router.post("/api/start-session")
async def start_session(body: StartSessionRequest, timing: Timing) -> dict[str, Any]:
    try:
        await timing.start_session(body.team, body.driver)
    except InvalidCompetitorError as exc:
        raise HTTPException(status_code=400, detail="Invalid team or driver") from exc
    return {"success": True, "driver": body.driver, "team": body.team}


@router.post("/api/stop-session")
async def stop_session(timing: Timing) -> dict[str, Any]:
    await timing.stop_session()
    return {"success": True}


@router.post("/api/trigger")
@router.post("/api/demo-trigger")
async def trigger(body: TriggerRequest, timing: Timing) -> dict[str, Any]:
    """Feed one gate trigger, stamped on arrival."""
    events = await timing.trigger(body.sensor)
    return {"success": True, "events": len(events)}


@router.get("/api/drivers/{team}/{driver}/laps")
async def driver_laps(team: str, driver: str, timing: Timing) -> list[dict[str, Any]]:
    try:
        history = timing.engine.driver_history(team, driver)
    except InvalidCompetitorError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return [record.to_wire() for record in history]


# -- Live feed -----------------------------------------------------------------


async def _forward(websocket: WebSocket, queue: asyncio.Queue[Message]) -> None:
    while True:
        message = await queue.get()
        await websocket.send_json(message)


async def _handle_client_message(
    message: Any, timing: TimingService, queue: asyncio.Queue[Message]
) -> None:
    if not isinstance(message, dict):
        logger.warning("Ignoring non-object message: %r", message)
        return

    name = message.get("event")
    data = message.get("data") or {}
    if name == "sensorTrigger":
        try:
            gate = TriggerRequest.model_validate(data).sensor
        except ValidationError:
            logger.warning("Ignoring unknown sensor: %r", data)
            return
        await timing.trigger(gate)
    elif name == "esp32Connected":
        logger.info("Gate controller connected: %r", data)
        queue.put_nowait({"event": "esp32Acknowledged", "data": {"status": "connected"}})
    else:
        logger.debug("Ignoring message %r", name)


@router.websocket("/ws")
async def timing_feed(websocket: WebSocket) -> None:
    """Push every timing event; accept sensor triggers from gate hardware."""
    timing: TimingService = websocket.app.state.timing
    await websocket.accept()
    queue = timing.subscribe()
    await websocket.send_json(timing.initial_data())
    sender = asyncio.create_task(_forward(websocket, queue))
    logger.info("Client connected (%d subscribed)", timing.subscriber_count)
    try:
        while True:
            try:
                message = await websocket.receive_json()
            except (ValueError, KeyError):
                logger.warning("Ignoring malformed or binary frame")
                continue
            await _handle_client_message(message, timing, queue)
    except WebSocketDisconnect as exc:
        logger.info("Client disconnected (code %s)", exc.code)
    finally:
        sender.cancel()
        with contextlib.suppress(asyncio.CancelledError, Exception):
            await sender
        timing.unsubscribe(queue)


# -- Application ---------------------------------------------------------------


def _load_roster(settings: Settings) -> Roster:
    if settings.roster_file:
        return Roster.from_file(settings.roster_file)
    return Roster.default()


def create_app(settings: Settings | None = None, engine: TimingEngine | None = None) -> FastAPI:
    """Build the app around one engine instance.

    Raises:
        RosterError: ``settings.roster_file`` is set but cannot be loaded.
    """
    settings = settings or Settings()
    set_log_dir(settings.log_dir)
    if engine is None:
        engine = TimingEngine(roster=_load_roster(settings))

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logging.basicConfig(level=settings.log_level.upper())
        logger.info("Timing server ready with %d team(s)", len(engine.roster))
        yield

    app = FastAPI(
        title="Gate Lap Timer",
        description="Sector and lap timing from three timing gates",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.timing = TimingService(engine)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.include_router(router)
    return app


def main() -> None:
    """Run the timing server under uvicorn."""
    import uvicorn

    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())
