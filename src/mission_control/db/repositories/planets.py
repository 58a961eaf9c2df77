from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mission_control.db.models import Planet


class PlanetRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_name(self, kepler_name: str) -> Planet | None:
        stmt = select(Planet).where(Planet.kepler_name == kepler_name)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def exists(self, kepler_name: str | None) -> bool:
        if not kepler_name:
            return False
        return await self.get_by_name(kepler_name) is not None

    async def add(self, kepler_name: str) -> Planet:
        # The catalog is loaded by its own job; this is here for fixtures and backfills.
        existing = await self.get_by_name(kepler_name)
        if existing is not None:
            return existing
        planet = Planet(kepler_name=kepler_name)
        self._session.add(planet)
        await self._session.flush()
        return planet
