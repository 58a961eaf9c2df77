"""
mission_control.db.models

Persistence schema for launch records.

Responsibilities:
- Launch: one row per flight number (imported or scheduled).
- Planet: the planet catalog consulted when scheduling (owned by a sibling loader).
- LaunchImport: ledger of completed seed imports from the upstream provider.
"""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import JSON, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from mission_control.db.base import Base


def _utcnow() -> datetime:
    # Persist naive UTC timestamps; SQLite has no tz-aware column type.
    return datetime.now(UTC).replace(tzinfo=None)


class Launch(Base):
    __tablename__ = "launches"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    flight_number: Mapped[int] = mapped_column(Integer, nullable=False, unique=True, index=True)

    mission: Mapped[str] = mapped_column(String(256), nullable=False)
    rocket: Mapped[str] = mapped_column(String(128), nullable=False)
    launch_date: Mapped[datetime] = mapped_column(nullable=False)
    # Checked against the planet catalog at scheduling time only; not a foreign key.
    target: Mapped[str | None] = mapped_column(String(256), nullable=True)

    upcoming: Mapped[bool] = mapped_column(nullable=False, default=False)
    # Upstream reports null for launches that have not flown yet.
    success: Mapped[bool | None] = mapped_column(nullable=True)
    customers: Mapped[list[str | None]] = mapped_column(JSON, nullable=False, default=list)

    version: Mapped[int] = mapped_column(Integer, nullable=False)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, onupdate=_utcnow)

    __mapper_args__ = {"version_id_col": version}


class Planet(Base):
    __tablename__ = "planets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    kepler_name: Mapped[str] = mapped_column(String(256), nullable=False, unique=True, index=True)


class LaunchImport(Base):
    __tablename__ = "launch_imports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    source: Mapped[str] = mapped_column(String(512), nullable=False)
    record_count: Mapped[int] = mapped_column(Integer, nullable=False)
    completed_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, index=True)


# Columns that make up the caller-visible shape of a launch record.
LAUNCH_FIELDS: tuple[str, ...] = (
    "flight_number",
    "mission",
    "rocket",
    "launch_date",
    "target",
    "upcoming",
    "success",
    "customers",
)


# --- Module Notes -----------------------------------------------------------
# `id`, `version`, `created_at` and `updated_at` are internal; LaunchRecord in
# `mission_control.schemas` never exposes them.
