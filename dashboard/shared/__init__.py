"""Shared helpers for the live timing dashboard."""

from .constants import (
    F1_RED,
    GATE_LABELS,
    PLOTLY_LAYOUT_DEFAULTS,
    REFRESH_SECONDS,
    SECTOR_WAITING_COLOR,
    TIER_COLORS,
)
from .fetchers import (
    fetch_driver_laps,
    fetch_session,
    fetch_teams,
    send_trigger,
    start_session,
    stop_session,
)
from .formatters import format_gap, format_lap_time
from .services import (
    build_leaderboard_rows,
    build_sector_cells,
    compute_gaps,
    compute_ideal_lap,
    team_color,
    tier_color,
)

__all__ = [
    "F1_RED",
    "GATE_LABELS",
    "PLOTLY_LAYOUT_DEFAULTS",
    "REFRESH_SECONDS",
    "SECTOR_WAITING_COLOR",
    "TIER_COLORS",
    "build_leaderboard_rows",
    "build_sector_cells",
    "compute_gaps",
    "compute_ideal_lap",
    "fetch_driver_laps",
    "fetch_session",
    "fetch_teams",
    "format_gap",
    "format_lap_time",
    "send_trigger",
    "start_session",
    "stop_session",
    "team_color",
    "tier_color",
]
