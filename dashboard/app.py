"""Live Lap Timer Dashboard — Streamlit + Plotly over the timing server API."""

from __future__ import annotations

import os

import plotly.graph_objects as go
import streamlit as st

from laptimer._logging import set_log_dir
from laptimer.exceptions import LapTimerAPIError, LapTimerError

from shared import (
    GATE_LABELS,
    PLOTLY_LAYOUT_DEFAULTS,
    REFRESH_SECONDS,
    build_leaderboard_rows,
    build_sector_cells,
    compute_gaps,
    compute_ideal_lap,
    fetch_driver_laps,
    fetch_session,
    fetch_teams,
    format_lap_time,
    send_trigger,
    start_session,
    stop_session,
    team_color,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Live Lap Timer",
    page_icon="⏱️",
    layout="wide",
)

set_log_dir(os.environ.get("LAPTIMER_LOG_DIR", "logs"))

try:
    teams = fetch_teams()
except LapTimerError as exc:
    st.error(f"Cannot reach the timing server: {exc}")
    st.stop()


# ── Sidebar: competitor selection ───────────────────────────────────────────

st.sidebar.title("Live Lap Timer")

selected_team = st.sidebar.selectbox("Team", list(teams.keys()))
selected_driver = st.sidebar.selectbox("Driver", teams[selected_team]["drivers"])

start_col, stop_col = st.sidebar.columns(2)
if start_col.button("Start", use_container_width=True):
    try:
        start_session(selected_team, selected_driver)
    except LapTimerAPIError as exc:
        st.sidebar.error(f"Could not start session: {exc.message}")
if stop_col.button("Stop", use_container_width=True):
    stop_session()

st.sidebar.subheader("Demo gates")
for sensor, label in GATE_LABELS.items():
    if st.sidebar.button(f"{sensor} — {label}", use_container_width=True):
        send_trigger(sensor)


# ── Live timing ──────────────────────────────────────────────────────────────


def _sector_panel(title: str, splits: list[dict]) -> None:
    """Three sector bars colored purple, green or yellow by tier."""
    st.caption(title)
    for col, cell in zip(st.columns(3), build_sector_cells(splits)):
        col.markdown(
            f'<div style="font-size:0.8rem">{cell["label"]}</div>'
            f'<div style="font-size:1.3rem;font-weight:600">{cell["time"]}</div>'
            f'<div style="height:6px;background:{cell["color"]};border-radius:3px"></div>',
            unsafe_allow_html=True,
        )


@st.fragment(run_every=REFRESH_SECONDS)
def live_timing() -> None:
    try:
        snapshot = fetch_session()
    except LapTimerError as exc:
        st.warning(f"Timing feed unavailable: {exc}")
        return

    driver = snapshot.get("currentDriver")
    team = snapshot.get("currentTeam")
    if driver:
        color = team_color(team, teams)
        st.markdown(f"## {driver}  \n**{team}** | {snapshot.get('phase', 'idle')}")
        st.markdown(
            f'<div style="height:4px;background:{color};border-radius:2px;'
            f'margin-bottom:1rem"></div>',
            unsafe_allow_html=True,
        )
        _sector_panel("Current lap", snapshot.get("currentSectors") or [])
        if snapshot.get("lastSectors"):
            _sector_panel("Last lap", snapshot["lastSectors"])
    else:
        st.info("No active session")

    best = snapshot.get("globalBest") or {}
    kpi = st.columns(4)
    kpi[0].metric("Best S1", format_lap_time(best.get("sector1")))
    kpi[1].metric("Best S2", format_lap_time(best.get("sector2")))
    kpi[2].metric("Best S3", format_lap_time(best.get("sector3")))
    kpi[3].metric("Best Lap", format_lap_time(best.get("lap")))

    entries = snapshot.get("leaderboard") or []
    st.subheader("Leaderboard")
    if not entries:
        st.caption("No completed laps yet.")
        return

    rows = build_leaderboard_rows(entries, teams)
    st.dataframe(
        [{k: v for k, v in row.items() if k != "color"} for row in rows],
        hide_index=True,
        use_container_width=True,
    )

    gaps = compute_gaps(entries)
    fig = go.Figure(
        go.Bar(
            x=[gap for _, gap in gaps],
            y=[name for name, _ in gaps],
            orientation="h",
            marker_color=[row["color"] for row in rows],
        )
    )
    fig.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        title="Gap to leader (s)",
        yaxis=dict(autorange="reversed"),
        height=60 + 32 * len(gaps),
    )
    st.plotly_chart(fig, use_container_width=True)


live_timing()


# ── Driver history ───────────────────────────────────────────────────────────

with st.expander(f"Lap history — {selected_driver}"):
    try:
        laps = fetch_driver_laps(selected_team, selected_driver)
    except LapTimerError as exc:
        st.error(f"Failed to load laps: {exc}")
        laps = []
    if laps:
        st.dataframe(
            [
                {
                    "Lap": i,
                    "S1": format_lap_time(lap["sector1"]),
                    "S2": format_lap_time(lap["sector2"]),
                    "S3": format_lap_time(lap["sector3"]),
                    "Time": format_lap_time(lap["lapDuration"]),
                }
                for i, lap in enumerate(laps, start=1)
            ],
            hide_index=True,
            use_container_width=True,
        )
        ideal = compute_ideal_lap(
            {
                "sector1": min(lap["sector1"] for lap in laps),
                "sector2": min(lap["sector2"] for lap in laps),
                "sector3": min(lap["sector3"] for lap in laps),
            }
        )
        st.caption(f"Ideal lap: {format_lap_time(ideal)}")
    else:
        st.caption("No laps recorded.")
