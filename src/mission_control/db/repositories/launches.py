"""
mission_control.db.repositories.launches

Repository for `Launch` entities.

Responsibilities:
- Look up and page through launch records.
- Upsert records keyed by flight number.
- Schedule new launches (next flight number, planet check, policy defaults).
- Abort launches.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from sqlalchemy import asc, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from mission_control.db.models import LAUNCH_FIELDS, Launch
from mission_control.db.repositories.planets import PlanetRepo
from mission_control.errors import LaunchNotFoundError, PlanetNotFoundError
from mission_control.schemas import LaunchRecord, NewLaunch


class LaunchRepo:
    def __init__(
        self,
        session: AsyncSession,
        *,
        default_flight_number: int = 100,
        default_customers: Iterable[str] = ("ZTM", "NASA"),
    ) -> None:
        self._session = session
        self._planets = PlanetRepo(session)
        self._default_flight_number = default_flight_number
        self._default_customers = tuple(default_customers)

    async def find_launch(self, **criteria: Any) -> Launch | None:
        # Equality match on any combination of Launch columns, e.g. flight_number=1, rocket="Falcon 1".
        unknown = set(criteria) - set(LAUNCH_FIELDS)
        if unknown:
            raise ValueError(f"unknown launch fields: {sorted(unknown)}")
        stmt = select(Launch).filter_by(**criteria).order_by(asc(Launch.flight_number)).limit(1)
        return (await self._session.execute(stmt)).scalars().first()

    async def launch_exists(self, flight_number: int) -> bool:
        return await self.find_launch(flight_number=flight_number) is not None

    async def latest_flight_number(self) -> int:
        stmt = select(Launch.flight_number).order_by(desc(Launch.flight_number)).limit(1)
        latest = (await self._session.execute(stmt)).scalar_one_or_none()
        return latest if latest is not None else self._default_flight_number

    async def list_launches(self, *, skip: int = 0, limit: int | None = None) -> list[LaunchRecord]:
        if skip < 0:
            raise ValueError("skip must be >= 0")
        if limit is not None and limit < 0:
            raise ValueError("limit must be >= 0")

        stmt = select(Launch).order_by(asc(Launch.flight_number)).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        rows = (await self._session.execute(stmt)).scalars().all()
        return [LaunchRecord.model_validate(row) for row in rows]

    async def upsert_launch(self, record: LaunchRecord) -> Launch:
        values = record.model_dump(include=set(LAUNCH_FIELDS))

        stmt = select(Launch).where(Launch.flight_number == record.flight_number)
        existing = (await self._session.execute(stmt)).scalar_one_or_none()
        if existing is not None:
            # Replace semantics: every persisted field reflects the latest write.
            for field, value in values.items():
                setattr(existing, field, value)
            await self._session.flush()
            return existing

        launch = Launch(**values)
        self._session.add(launch)
        await self._session.flush()
        return launch

    async def schedule_launch(self, new_launch: NewLaunch) -> LaunchRecord:
        # Planet check happens before anything is written.
        if not await self._planets.exists(new_launch.target):
            raise PlanetNotFoundError(new_launch.target)

        flight_number = await self.latest_flight_number() + 1
        record = LaunchRecord(
            flight_number=flight_number,
            mission=new_launch.mission,
            rocket=new_launch.rocket,
            launch_date=new_launch.launch_date,
            target=new_launch.target,
            upcoming=True,
            success=True,
            customers=self._merge_customers(new_launch.customers),
        )
        await self.upsert_launch(record)
        return record

    async def abort_launch(self, flight_number: int) -> bool:
        stmt = select(Launch).where(Launch.flight_number == flight_number).with_for_update()
        launch = (await self._session.execute(stmt)).scalar_one_or_none()
        if launch is None:
            raise LaunchNotFoundError(flight_number)

        launch.upcoming = False
        launch.success = False
        await self._session.flush()
        # Report the stored state, not the attributes just assigned.
        await self._session.refresh(launch)
        return not launch.upcoming and not launch.success

    def _merge_customers(self, customers: Iterable[str]) -> list[str]:
        merged = list(self._default_customers)
        for customer in customers:
            if customer not in merged:
                merged.append(customer)
        return merged


# --- Module Notes -----------------------------------------------------------
# latest_flight_number() + upsert is a read-then-write: two concurrent schedulers can
# pick the same number and the second write replaces the first.
