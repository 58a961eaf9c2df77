"""
tests.conftest

Shared fixtures: settings, a temp-file SQLite database and a mocked upstream.
"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from mission_control.db.session import create_sessionmaker
from mission_control.runtime import bootstrap
from mission_control.settings import Settings

FALCONSAT_DOC: dict[str, Any] = {
    "flight_number": 1,
    "name": "FalconSat",
    "rocket": {"name": "Falcon 1"},
    "date_local": "2006-03-24",
    "upcoming": False,
    "success": False,
    "payloads": [{"customers": ["NASA"]}],
}


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(env="test", database_url=f"sqlite+aiosqlite:///{tmp_path / 'launches.db'}")


@pytest_asyncio.fixture
async def engine(settings: Settings) -> AsyncIterator[AsyncEngine]:
    runtime = await bootstrap(settings)
    yield runtime.engine
    await runtime.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(engine)


@pytest_asyncio.fixture
async def session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


class FakeUpstream:
    """Records requests and answers the launches query with canned docs."""

    def __init__(self, docs: list[dict[str, Any]] | None = None, *, status_code: int = 200) -> None:
        self.docs = docs if docs is not None else [FALCONSAT_DOC]
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"error": "unavailable"})
        return httpx.Response(200, json={"docs": self.docs, "totalDocs": len(self.docs)})

    def client(self, settings: Settings) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=httpx.MockTransport(self.handler),
            base_url=settings.spacex_api_url,
        )

    def request_body(self, index: int = 0) -> dict[str, Any]:
        return json.loads(self.requests[index].content)


@pytest.fixture
def upstream_factory() -> Callable[..., FakeUpstream]:
    return FakeUpstream
