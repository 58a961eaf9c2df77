"""
mission_control.services.launch_importer

Seeds the launch store from the upstream provider.

Responsibilities:
- Decide whether the store has already been seeded.
- Download launch documents and normalize them into launch records.
- Upsert every record and write the import ledger entry.
"""

from __future__ import annotations

import structlog
from pydantic import ValidationError

from mission_control.clients.spacex import SpaceXClient, SpaceXLaunchDoc
from mission_control.db.repositories.imports import ImportRepo
from mission_control.db.repositories.launches import LaunchRepo
from mission_control.errors import UpstreamFetchError
from mission_control.observability.logging import get_logger
from mission_control.schemas import LaunchRecord

log = get_logger(__name__)

# First record of the upstream history; stores seeded before the import ledger existed
# are recognized by it.
SENTINEL_LAUNCH = {"flight_number": 1, "rocket": "Falcon 1", "mission": "FalconSat"}


class LaunchImporter:
    def __init__(
        self,
        *,
        launches: LaunchRepo,
        imports: ImportRepo,
        client: SpaceXClient,
    ) -> None:
        self._launches = launches
        self._imports = imports
        self._client = client

    async def is_seeded(self) -> bool:
        if await self._imports.latest() is not None:
            return True
        return await self._launches.find_launch(**SENTINEL_LAUNCH) is not None

    async def populate_if_empty(self) -> int:
        if await self.is_seeded():
            log.info("launch_data_already_loaded")
            return 0
        return await self.populate_launches()

    async def populate_launches(self) -> int:
        with structlog.contextvars.bound_contextvars(source=self._client.source):
            log.info("launch_data_download_started")
            try:
                docs = await self._client.query_launches()
                records = [to_launch_record(doc) for doc in docs]
            except UpstreamFetchError as e:
                log.error("launch_data_download_failed", error=str(e), status_code=e.status_code)
                raise

            for record in records:
                await self._launches.upsert_launch(record)
                log.info(
                    "launch_imported",
                    flight_number=record.flight_number,
                    mission=record.mission,
                )

            await self._imports.record(source=self._client.source, record_count=len(records))
            log.info("launch_data_loaded", record_count=len(records))
            return len(records)


def to_launch_record(doc: SpaceXLaunchDoc) -> LaunchRecord:
    try:
        return LaunchRecord(
            flight_number=doc.flight_number,
            mission=doc.name,
            rocket=doc.rocket.name,
            launch_date=doc.date_local,
            upcoming=doc.upcoming,
            success=doc.success,
            customers=doc.customers,
        )
    except ValidationError as e:
        raise UpstreamFetchError(
            f"Launch document {doc.flight_number} could not be normalized: {e}"
        ) from e


# --- Module Notes -----------------------------------------------------------
# Every document is normalized before the first write, so a malformed upstream body
# never leaves a half-seeded store. Upserts are idempotent by flight number, so a
# re-run after clearing the ledger is safe.
