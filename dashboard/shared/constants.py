"""Shared constants for the live timing dashboard."""

from __future__ import annotations

F1_RED = "#E10600"

# Sector/lap tier colors, as on the timing screens
TIER_COLORS: dict[str, str] = {
    "globalBest": "#A020F0",  # purple
    "personalBest": "#00C853",  # green
    "ordinary": "#FFD600",  # yellow
}

# Sector not yet completed on the current lap
SECTOR_WAITING_COLOR = "#3A3A3A"

GATE_LABELS: dict[str, str] = {
    "S1": "Start / Finish",
    "S2": "Sector 1 → 2",
    "S3": "Sector 2 → 3",
}

REFRESH_SECONDS = 1.0

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font_color="#F0F0F0",
    margin=dict(l=40, r=20, t=40, b=40),
)
