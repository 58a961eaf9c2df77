"""
mission_control.runtime

Composition root for embedding the launch records layer.

Responsibilities:
- Configure logging from Settings.
- Create the engine/sessionmaker pair and make sure the schema exists.
- Hand out LaunchService instances bound to a session.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from mission_control.db.init_db import init_db
from mission_control.db.session import create_engine, create_sessionmaker
from mission_control.observability.logging import configure_logging, get_logger
from mission_control.services.launch_service import LaunchService
from mission_control.settings import Settings, get_settings

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Runtime:
    settings: Settings
    engine: AsyncEngine
    sessionmaker: async_sessionmaker[AsyncSession]

    def launch_service(
        self, session: AsyncSession, *, http: httpx.AsyncClient | None = None
    ) -> LaunchService:
        return LaunchService(session=session, settings=self.settings, http=http)

    async def dispose(self) -> None:
        await self.engine.dispose()
        log.info("shutdown")


async def bootstrap(settings: Settings | None = None) -> Runtime:
    settings = settings or get_settings()
    configure_logging(settings)

    engine = create_engine(settings)
    tables = await init_db(engine)
    log.info("startup", dialect=engine.dialect.name, tables=tables)
    return Runtime(settings=settings, engine=engine, sessionmaker=create_sessionmaker(engine))
