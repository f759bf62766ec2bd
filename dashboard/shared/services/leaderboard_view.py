"""Pure helpers that shape the leaderboard for display (no Streamlit dependency)."""

from __future__ import annotations

from ..constants import F1_RED, TIER_COLORS
from ..formatters import format_gap, format_lap_time


def build_leaderboard_rows(entries: list[dict], teams: dict[str, dict]) -> list[dict]:
    """Turn wire leaderboard entries into table rows with position, gap and color."""
    if not entries:
        return []
    leader = entries[0].get("bestLap")
    rows = []
    for position, entry in enumerate(entries, start=1):
        team = entry.get("team", "")
        rows.append(
            {
                "Pos": position,
                "Driver": entry.get("driver", ""),
                "Team": team,
                "Best Lap": format_lap_time(entry.get("bestLap")),
                "Gap": format_gap(entry.get("bestLap"), leader),
                "S1": format_lap_time(entry.get("sector1")),
                "S2": format_lap_time(entry.get("sector2")),
                "S3": format_lap_time(entry.get("sector3")),
                "Laps": entry.get("laps", 0),
                "color": team_color(team, teams),
            }
        )
    return rows


def compute_gaps(entries: list[dict]) -> list[tuple[str, float]]:
    """Return (driver, gap to leader in seconds) pairs, leader first."""
    if not entries:
        return []
    leader = entries[0]["bestLap"]
    return [(e["driver"], (e["bestLap"] - leader) / 1000) for e in entries]


def compute_ideal_lap(entry: dict) -> int | None:
    """Sum of a driver's best sectors, or None if any is missing."""
    sectors = [entry.get("sector1"), entry.get("sector2"), entry.get("sector3")]
    if any(s is None for s in sectors):
        return None
    return sum(sectors)


def team_color(team: str, teams: dict[str, dict]) -> str:
    """Return the roster color for a team, defaulting to F1_RED."""
    info = teams.get(team) or {}
    return info.get("color") or F1_RED


def tier_color(tier: str | None) -> str:
    return TIER_COLORS.get(tier or "", TIER_COLORS["ordinary"])
