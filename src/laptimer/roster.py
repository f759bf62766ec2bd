"""Static catalog of teams and drivers allowed to take the track."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from laptimer.exceptions import InvalidCompetitorError, RosterError
from laptimer.models.roster import DriverKey, Team

logger = logging.getLogger(__name__)

# F1 2024 grid
DEFAULT_TEAMS: dict[str, dict[str, Any]] = {
    "Red Bull Racing": {"color": "#3671C6", "drivers": ["Max Verstappen", "Sergio Perez"]},
    "Ferrari": {"color": "#E8002D", "drivers": ["Charles Leclerc", "Carlos Sainz"]},
    "Mercedes": {"color": "#27F4D2", "drivers": ["Lewis Hamilton", "George Russell"]},
    "McLaren": {"color": "#FF8000", "drivers": ["Lando Norris", "Oscar Piastri"]},
    "Aston Martin": {"color": "#229971", "drivers": ["Fernando Alonso", "Lance Stroll"]},
    "Alpine": {"color": "#FF87BC", "drivers": ["Pierre Gasly", "Esteban Ocon"]},
    "Williams": {"color": "#64C4FF", "drivers": ["Alex Albon", "Logan Sargeant"]},
    "RB": {"color": "#6692FF", "drivers": ["Yuki Tsunoda", "Daniel Ricciardo"]},
    "Kick Sauber": {"color": "#52E252", "drivers": ["Valtteri Bottas", "Zhou Guanyu"]},
    "Haas": {"color": "#B6BABD", "drivers": ["Kevin Magnussen", "Nico Hulkenberg"]},
}


class Roster:
    """Read-only mapping of team name to Team, in load order.

    Usage:
        roster = Roster.default()
        key = roster.validate("Ferrari", "Charles Leclerc")
    """

    def __init__(self, teams: list[Team]) -> None:
        self._teams: dict[str, Team] = {}
        for team in teams:
            if team.name in self._teams:
                raise RosterError(f"Duplicate team {team.name!r}")
            self._teams[team.name] = team

    @classmethod
    def from_mapping(cls, data: Mapping[str, Mapping[str, Any]]) -> Roster:
        """Build from ``{team: {"color": ..., "drivers": [...]}}``."""
        try:
            teams = [Team.model_validate({"name": name, **info}) for name, info in data.items()]
        except ValidationError as exc:
            raise RosterError(f"Invalid roster: {exc}") from exc
        return cls(teams)

    @classmethod
    def from_file(cls, path: str | Path) -> Roster:
        """Load a JSON roster file in the same shape as ``DEFAULT_TEAMS``."""
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise RosterError(f"Cannot read roster {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise RosterError(f"Roster {path} must be a JSON object keyed by team name")
        roster = cls.from_mapping(data)
        logger.info("Loaded %d team(s) from %s", len(roster), path)
        return roster

    @classmethod
    def default(cls) -> Roster:
        return cls.from_mapping(DEFAULT_TEAMS)

    def __len__(self) -> int:
        return len(self._teams)

    def __iter__(self) -> Iterator[Team]:
        return iter(self._teams.values())

    def __contains__(self, team: object) -> bool:
        return team in self._teams

    def team(self, name: str) -> Team | None:
        return self._teams.get(name)

    def validate(self, team: str, driver: str) -> DriverKey:
        """Return the key for a rostered competitor.

        Raises:
            InvalidCompetitorError: unknown team, or driver not on that team.
        """
        entry = self._teams.get(team)
        if entry is None or not entry.has_driver(driver):
            raise InvalidCompetitorError(team, driver)
        return DriverKey(team, driver)

    def to_wire(self) -> dict[str, dict[str, Any]]:
        """Serialize as ``{team: {"color": ..., "drivers": [...]}}``."""
        return {
            team.name: {"color": team.color, "drivers": list(team.drivers)}
            for team in self._teams.values()
        }
