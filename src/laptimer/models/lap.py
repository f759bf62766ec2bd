"""Completed lap model."""

from __future__ import annotations

from datetime import timedelta

from pydantic import Field, model_validator

from laptimer.models._base import WireModel


class LapRecord(WireModel):
    """One completed lap. All durations are milliseconds."""

    sector1: int = Field(ge=0)
    sector2: int = Field(ge=0)
    sector3: int = Field(ge=0)
    lap_duration: int = Field(ge=0)
    completed_at: int

    @model_validator(mode="after")
    def _sectors_add_up(self) -> LapRecord:
        if self.total_sector_time != self.lap_duration:
            raise ValueError(
                f"lap_duration {self.lap_duration} does not equal sector sum {self.total_sector_time}"
            )
        return self

    @property
    def total_sector_time(self) -> int:
        """Sum of the three sector durations."""
        return self.sector1 + self.sector2 + self.sector3

    @property
    def sectors(self) -> tuple[int, int, int]:
        return (self.sector1, self.sector2, self.sector3)

    @property
    def lap_timedelta(self) -> timedelta:
        """Lap duration as a timedelta."""
        return timedelta(milliseconds=self.lap_duration)
