"""Formatting helpers for the live timing dashboard."""

from __future__ import annotations


def format_lap_time(ms: int | None) -> str:
    """Format milliseconds as m:ss.fff or '—' if None."""
    if ms is None:
        return "—"
    mins, rem = divmod(ms, 60_000)
    secs, millis = divmod(rem, 1000)
    return f"{mins}:{secs:02d}.{millis:03d}"


def format_gap(ms: int | None, leader_ms: int | None) -> str:
    """Format the gap to the leader as +s.fff, or 'LEADER' for a zero gap."""
    if ms is None or leader_ms is None:
        return "—"
    gap = ms - leader_ms
    if gap == 0:
        return "LEADER"
    return f"+{gap / 1000:.3f}"
