"""Sector bars for the lap in progress (no Streamlit dependency)."""

from __future__ import annotations

from ..constants import SECTOR_WAITING_COLOR
from ..formatters import format_lap_time
from .leaderboard_view import tier_color


def build_sector_cells(splits: list[dict]) -> list[dict]:
    """One display cell per sector; sectors not in ``splits`` are waiting."""
    by_sector = {split["sector"]: split for split in splits}
    cells = []
    for sector in (1, 2, 3):
        split = by_sector.get(sector)
        if split is None:
            cells.append(
                {
                    "label": f"S{sector}",
                    "time": format_lap_time(None),
                    "tier": None,
                    "color": SECTOR_WAITING_COLOR,
                }
            )
        else:
            cells.append(
                {
                    "label": f"S{sector}",
                    "time": format_lap_time(split.get("duration")),
                    "tier": split.get("tier"),
                    "color": tier_color(split.get("tier")),
                }
            )
    return cells
