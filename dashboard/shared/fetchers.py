"""Timing server fetchers for the dashboard."""

from __future__ import annotations

import os

import streamlit as st

from laptimer import TimingClient
from laptimer._logging import log_api_call

SERVER_URL = os.environ.get("LAPTIMER_SERVER_URL", "http://localhost:3000")


@st.cache_resource(show_spinner=False)
def get_client() -> TimingClient:
    return TimingClient(SERVER_URL)


# The roster is static for the life of the server.
@st.cache_data(ttl=3600)
@log_api_call
def fetch_teams() -> dict[str, dict]:
    return {t.name: {"color": t.color, "drivers": list(t.drivers)} for t in get_client().teams()}


@log_api_call
def fetch_session() -> dict:
    return get_client().session().to_wire()


@log_api_call
def fetch_driver_laps(team: str, driver: str) -> list[dict]:
    return [lap.to_wire() for lap in get_client().driver_laps(team, driver)]


@log_api_call
def start_session(team: str, driver: str) -> dict:
    return get_client().start_session(team, driver)


@log_api_call
def stop_session() -> dict:
    return get_client().stop_session()


@log_api_call
def send_trigger(sensor: str) -> int:
    return get_client().trigger(sensor)
