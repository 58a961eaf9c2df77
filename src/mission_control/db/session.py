"""
mission_control.db.session

Async SQLAlchemy engine + session factory helpers.

Responsibilities:
- Create the async engine for the launch store from settings.
- Create the async sessionmaker LaunchService sessions come from.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from mission_control.settings import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    return create_async_engine(
        settings.database_url,
        pool_pre_ping=True,
        # SQL echo follows the service log level so DEBUG runs show the upsert statements.
        echo=settings.log_level.upper() == "DEBUG",
    )


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Repositories flush explicitly; autoflush stays off so reads never write by surprise.
    # expire_on_commit=False keeps returned Launch rows readable after LaunchService commits.
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
    )


# --- Module Notes -----------------------------------------------------------
# Callers open one session per logical request and hand it to LaunchService,
# which owns commit/rollback.
