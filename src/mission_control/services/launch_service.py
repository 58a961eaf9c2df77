"""
mission_control.services.launch_service

Public boundary for launch records (transaction owner).

Responsibilities:
- Expose the five operations the rest of the system may call:
  load_launch_data, exists_launch_with_id, get_all_launches,
  schedule_new_launch, abort_launch_by_id.
- Commit on success, roll back and re-raise on failure.
"""

from __future__ import annotations

import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from mission_control.clients.spacex import SpaceXClient, create_http_client
from mission_control.db.repositories.imports import ImportRepo
from mission_control.db.repositories.launches import LaunchRepo
from mission_control.observability.logging import get_logger
from mission_control.schemas import LaunchRecord, NewLaunch
from mission_control.services.launch_importer import LaunchImporter
from mission_control.settings import Settings

log = get_logger(__name__)


class LaunchService:
    def __init__(
        self,
        *,
        session: AsyncSession,
        settings: Settings,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        self._session = session
        self._settings = settings
        # Only needed by load_launch_data(); a short-lived client is opened when absent.
        self._http = http

        self._launches = LaunchRepo(
            session,
            default_flight_number=settings.default_flight_number,
            default_customers=settings.default_customers,
        )
        self._imports = ImportRepo(session)

    async def load_launch_data(self) -> int:
        try:
            if self._http is not None:
                imported = await self._importer(self._http).populate_if_empty()
            else:
                async with create_http_client(self._settings) as http:
                    imported = await self._importer(http).populate_if_empty()
        except Exception:
            await self._session.rollback()
            raise
        await self._session.commit()
        return imported

    async def exists_launch_with_id(self, flight_number: int) -> bool:
        return await self._launches.launch_exists(flight_number)

    async def get_all_launches(self, skip: int = 0, limit: int | None = None) -> list[LaunchRecord]:
        return await self._launches.list_launches(skip=skip, limit=limit)

    async def schedule_new_launch(self, new_launch: NewLaunch) -> LaunchRecord:
        try:
            record = await self._launches.schedule_launch(new_launch)
        except Exception:
            await self._session.rollback()
            raise
        await self._session.commit()
        log.info(
            "launch_scheduled",
            flight_number=record.flight_number,
            mission=record.mission,
            target=record.target,
        )
        return record

    async def abort_launch_by_id(self, flight_number: int) -> bool:
        try:
            aborted = await self._launches.abort_launch(flight_number)
        except Exception:
            await self._session.rollback()
            raise
        await self._session.commit()
        log.info("launch_aborted", flight_number=flight_number, aborted=aborted)
        return aborted

    def _importer(self, http: httpx.AsyncClient) -> LaunchImporter:
        return LaunchImporter(
            launches=self._launches,
            imports=self._imports,
            client=SpaceXClient(settings=self._settings, http=http),
        )


# --- Module Notes -----------------------------------------------------------
# A failed import rolls back every upsert from that run, so the store is either
# fully seeded or untouched.
