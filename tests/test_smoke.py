"""
tests.test_smoke

Minimal smoke tests: the runtime bootstraps and the ambient stack is wired.
"""

from __future__ import annotations

import logging

import pytest
from sqlalchemy import inspect, text
from sqlalchemy.ext.asyncio import AsyncEngine

from mission_control.observability.logging import configure_logging, get_logger
from mission_control.runtime import bootstrap
from mission_control.settings import Settings, get_settings


@pytest.mark.asyncio
async def test_init_db_creates_tables(engine: AsyncEngine) -> None:
    async with engine.connect() as conn:
        assert (await conn.execute(text("SELECT 1"))).scalar_one() == 1
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

    assert {"launches", "planets", "launch_imports"} <= set(tables)


@pytest.mark.asyncio
async def test_bootstrap_reads_settings_from_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("MISSION_CONTROL_ENV", "test")
    monkeypatch.setenv("MISSION_CONTROL_SERVICE_NAME", "launch-desk")
    monkeypatch.setenv("MISSION_CONTROL_DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'env.db'}")
    get_settings.cache_clear()

    runtime = await bootstrap()
    try:
        assert runtime.settings.service_name == "launch-desk"
        async with runtime.sessionmaker() as session:
            svc = runtime.launch_service(session)
            assert await svc.get_all_launches(0, 10) == []
    finally:
        await runtime.dispose()
        get_settings.cache_clear()


def test_configure_logging_emits_json(caplog) -> None:
    configure_logging(Settings(env="test", service_name="mission-control-test", log_level="info"))
    with caplog.at_level(logging.INFO):
        get_logger("tests.smoke").info("smoke_event", flight_number=101)

    out = "\n".join(record.getMessage() for record in caplog.records)
    assert '"event": "smoke_event"' in out
    assert '"service": "mission-control-test"' in out
    assert '"env": "test"' in out


def test_settings_read_env(monkeypatch) -> None:
    monkeypatch.setenv("MISSION_CONTROL_DEFAULT_FLIGHT_NUMBER", "200")
    monkeypatch.setenv("MISSION_CONTROL_DEFAULT_CUSTOMERS", '["ZTM", "ESA"]')
    monkeypatch.setenv("MISSION_CONTROL_SPACEX_API_URL", "https://mirror.example/")

    settings = Settings()

    assert settings.default_flight_number == 200
    assert settings.default_customers == ["ZTM", "ESA"]
    assert settings.spacex_launches_query_url == "https://mirror.example/v4/launches/query"


def test_settings_defaults() -> None:
    settings = Settings()

    assert settings.default_flight_number == 100
    assert settings.default_customers == ["ZTM", "NASA"]
    assert settings.spacex_launches_query_url == "https://api.spacexdata.com/v4/launches/query"
