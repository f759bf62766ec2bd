"""Service layer — display logic for the live timing dashboard."""

from .current_lap import build_sector_cells
from .leaderboard_view import (
    build_leaderboard_rows,
    compute_gaps,
    compute_ideal_lap,
    team_color,
    tier_color,
)

__all__ = [
    "build_leaderboard_rows",
    "build_sector_cells",
    "compute_gaps",
    "compute_ideal_lap",
    "team_color",
    "tier_color",
]
