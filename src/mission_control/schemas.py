"""
mission_control.schemas

Pydantic models for the launch records boundary.

Responsibilities:
- LaunchRecord: the caller-visible shape of a launch (no internal ids/version markers).
- NewLaunch: input accepted when scheduling a launch.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def normalize_launch_date(value: Any) -> Any:
    """
    Accept ISO datetimes (with or without offset) and date-only strings.
    Aware values are converted to naive UTC to match the stored column.
    """

    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip())
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(UTC).replace(tzinfo=None)
    return value


class LaunchRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    flight_number: int
    mission: str
    rocket: str
    launch_date: datetime
    target: str | None = None
    upcoming: bool
    success: bool | None = None
    customers: list[str | None] = Field(default_factory=list)

    @field_validator("launch_date", mode="before")
    @classmethod
    def parse_launch_date(cls, value: Any) -> Any:
        return normalize_launch_date(value)


class NewLaunch(BaseModel):
    mission: str = Field(min_length=1, max_length=256)
    rocket: str = Field(min_length=1, max_length=128)
    launch_date: datetime
    target: str = Field(min_length=1, max_length=256)
    customers: list[str] = Field(default_factory=list)

    @field_validator("launch_date", mode="before")
    @classmethod
    def parse_launch_date(cls, value: Any) -> Any:
        return normalize_launch_date(value)


# --- Module Notes -----------------------------------------------------------
# HTTP request validation lives with the routing layer; NewLaunch only guards the
# fields this package persists.
