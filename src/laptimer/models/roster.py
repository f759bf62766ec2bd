"""Team and competitor identity models."""

from __future__ import annotations

import json
from dataclasses import dataclass

from pydantic import Field

from laptimer.models._base import WireModel


@dataclass(frozen=True, order=True)
class DriverKey:
    """Composite identity of one competitor.

    Ordered by team, then driver. Two drivers with the same name on
    different teams are different competitors.
    """

    team: str
    driver: str

    def __str__(self) -> str:
        return f"{self.driver} ({self.team})"

    def to_wire(self) -> str:
        """Single-string form, a JSON array such as ``["Ferrari", "Charles Leclerc"]``."""
        return json.dumps([self.team, self.driver])

    @classmethod
    def from_wire(cls, raw: str) -> DriverKey:
        """Parse the :meth:`to_wire` form. Raises ValueError if malformed."""
        try:
            parts = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid driver key: {raw!r}") from exc
        if not (isinstance(parts, list) and len(parts) == 2 and all(isinstance(p, str) for p in parts)):
            raise ValueError(f"Invalid driver key: {raw!r}")
        return cls(team=parts[0], driver=parts[1])


class Team(WireModel):
    """A team with its display color and ordered driver list."""

    name: str
    color: str
    drivers: tuple[str, ...] = Field(default_factory=tuple)

    def has_driver(self, driver: str) -> bool:
        return driver in self.drivers

    def driver_keys(self) -> list[DriverKey]:
        """Keys for every driver on this team, in roster order."""
        return [DriverKey(self.name, driver) for driver in self.drivers]
