"""
mission_control.db.repositories.imports

Repository for `LaunchImport` ledger rows.

Responsibilities:
- Record a completed seed import.
- Answer "has this store been seeded?" without relying on a magic record.
"""

from __future__ import annotations

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from mission_control.db.models import LaunchImport


class ImportRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def latest(self) -> LaunchImport | None:
        stmt = select(LaunchImport).order_by(desc(LaunchImport.completed_at)).limit(1)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def record(self, *, source: str, record_count: int) -> LaunchImport:
        entry = LaunchImport(source=source, record_count=record_count)
        self._session.add(entry)
        await self._session.flush()
        return entry
