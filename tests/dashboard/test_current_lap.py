"""Tests for shared/services/current_lap.py."""

from __future__ import annotations

from shared.constants import SECTOR_WAITING_COLOR, TIER_COLORS
from shared.services.current_lap import build_sector_cells
from tests.conftest import SAMPLE_SESSION


class TestBuildSectorCells:
    def test_no_sectors_yet(self):
        cells = build_sector_cells([])
        assert [c["label"] for c in cells] == ["S1", "S2", "S3"]
        assert all(c["time"] == "—" and c["tier"] is None for c in cells)
        assert {c["color"] for c in cells} == {SECTOR_WAITING_COLOR}

    def test_colors_by_tier(self):
        cells = build_sector_cells(
            [
                {"sector": 1, "duration": 30000, "tier": "globalBest"},
                {"sector": 2, "duration": 35123, "tier": "personalBest"},
            ]
        )
        assert [c["color"] for c in cells] == [
            TIER_COLORS["globalBest"],
            TIER_COLORS["personalBest"],
            SECTOR_WAITING_COLOR,
        ]
        assert [c["time"] for c in cells] == ["0:30.000", "0:35.123", "—"]

    def test_ordinary_sector_is_yellow(self):
        cells = build_sector_cells([{"sector": 3, "duration": 31000, "tier": "ordinary"}])
        assert cells[2]["color"] == TIER_COLORS["ordinary"]
        assert cells[0]["color"] == SECTOR_WAITING_COLOR

    def test_last_lap_from_snapshot(self):
        cells = build_sector_cells(SAMPLE_SESSION["lastSectors"])
        assert [c["tier"] for c in cells] == ["globalBest"] * 3
