"""
mission_control.clients.spacex

HTTP client boundary for the SpaceX launch-data API.

Responsibilities:
- Issue the single non-paginated launches query used for seeding.
- Parse the response into typed documents (rocket name, payload customers).
- Turn every non-200 / transport / shape failure into `UpstreamFetchError`.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel, Field

from mission_control.errors import UpstreamFetchError
from mission_control.settings import Settings

# Only the rocket name and payload customers are populated; everything else stays an id.
LAUNCHES_QUERY: dict[str, Any] = {
    "query": {},
    "options": {
        "pagination": False,
        "populate": [
            {"path": "rocket", "select": {"name": 1}},
            {"path": "payloads", "select": {"customers": 1}},
        ],
    },
}


class SpaceXRocket(BaseModel):
    name: str


class SpaceXPayload(BaseModel):
    customers: list[str | None] = Field(default_factory=list)


class SpaceXLaunchDoc(BaseModel):
    flight_number: int
    name: str
    rocket: SpaceXRocket
    date_local: str
    upcoming: bool
    success: bool | None = None
    payloads: list[SpaceXPayload] = Field(default_factory=list)

    @property
    def customers(self) -> list[str | None]:
        return [customer for payload in self.payloads for customer in payload.customers]


class SpaceXLaunchesResponse(BaseModel):
    docs: list[SpaceXLaunchDoc]


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.spacex_api_url,
        timeout=settings.http_timeout_seconds,
    )


class SpaceXClient:
    def __init__(self, *, settings: Settings, http: httpx.AsyncClient) -> None:
        self._settings = settings
        self._http = http

    @property
    def source(self) -> str:
        return self._settings.spacex_launches_query_url

    async def query_launches(self) -> list[SpaceXLaunchDoc]:
        try:
            r = await self._http.post(self._settings.spacex_launches_query_path, json=LAUNCHES_QUERY)
        except httpx.HTTPError as e:
            raise UpstreamFetchError(f"Launch data download failed: {e}") from e

        if r.status_code != httpx.codes.OK:
            raise UpstreamFetchError(
                f"Launch data download failed with status {r.status_code}",
                status_code=r.status_code,
            )

        try:
            return SpaceXLaunchesResponse.model_validate(r.json()).docs
        except ValueError as e:
            # Covers both JSON decoding errors and pydantic ValidationError.
            raise UpstreamFetchError(
                "Launch data download returned an unexpected body", status_code=r.status_code
            ) from e


# --- Module Notes -----------------------------------------------------------
# No retries: seeding is a one-off step and a failed download aborts the import.
