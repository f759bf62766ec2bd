"""Enumerations shared by the timing core and the wire format."""

from __future__ import annotations

from enum import Enum


class Gate(str, Enum):
    """Physical timing gates, valued by the sensor name the hardware sends."""

    GATE0 = "S1"  # start/finish line
    GATE1 = "S2"  # sector 1/2 boundary
    GATE2 = "S3"  # sector 2/3 boundary

    @classmethod
    def from_wire(cls, raw: str) -> Gate:
        """Parse a sensor name such as ``"S1"`` or ``" s2\\n"``.

        Raises ValueError for anything that is not a known sensor.
        """
        return cls(raw.strip().upper())


class LapPhase(str, Enum):
    """Where the active competitor is on the current lap."""

    IDLE = "idle"
    IN_SECTOR_1 = "inSector1"
    IN_SECTOR_2 = "inSector2"
    IN_SECTOR_3 = "inSector3"


class Tier(str, Enum):
    """Classification of a sector or lap time, best first."""

    GLOBAL_BEST = "globalBest"
    PERSONAL_BEST = "personalBest"
    ORDINARY = "ordinary"
