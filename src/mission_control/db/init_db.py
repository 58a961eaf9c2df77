"""
mission_control.db.init_db

Schema bootstrap for the launch store.

Responsibilities:
- Create the launches/planets/launch_imports tables if they don't exist.
- Report which tables the store now holds.
"""

from __future__ import annotations

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncEngine

from mission_control.db import models  # noqa: F401  # registers Launch/Planet/LaunchImport on Base.metadata
from mission_control.db.base import Base


async def init_db(engine: AsyncEngine) -> list[str]:
    # create_all is a no-op for tables that already exist, so this is safe on every start.
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        return sorted(await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names()))
