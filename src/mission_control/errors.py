"""
mission_control.errors

Failure kinds raised by the launch records layer.

Responsibilities:
- UpstreamFetchError: seeding from the launch-data provider failed (fatal).
- PlanetNotFoundError: a launch was scheduled against an unknown planet.
- LaunchNotFoundError: an operation referenced a flight number with no record.
"""

from __future__ import annotations


class MissionControlError(Exception):
    pass


class UpstreamFetchError(MissionControlError):
    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PlanetNotFoundError(MissionControlError):
    def __init__(self, target: str | None) -> None:
        super().__init__(f"No matching planet was found: {target!r}")
        self.target = target


class LaunchNotFoundError(MissionControlError):
    def __init__(self, flight_number: int) -> None:
        super().__init__(f"No launch with flight number {flight_number}")
        self.flight_number = flight_number
