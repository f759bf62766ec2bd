"""Request bodies for the timing API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator

from laptimer.models.timing import Gate


class StartSessionRequest(BaseModel):
    team: str
    driver: str


class TriggerRequest(BaseModel):
    sensor: Gate

    @field_validator("sensor", mode="before")
    @classmethod
    def _parse_sensor(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Gate.from_wire(value)
        return value
