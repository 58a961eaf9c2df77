"""
mission_control.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hold the launch numbering and customer policy defaults.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MISSION_CONTROL_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "mission-control"
    log_level: str = "INFO"

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./mission_control.db"

    # Upstream launch-data provider (consulted only when seeding)
    spacex_api_url: str = "https://api.spacexdata.com"
    spacex_launches_query_path: str = "/v4/launches/query"
    http_timeout_seconds: float = 30.0

    # Scheduling policy
    # Returned by latest_flight_number() on an empty store, so the first scheduled launch is +1.
    default_flight_number: int = 100
    default_customers: list[str] = Field(default_factory=lambda: ["ZTM", "NASA"])

    @property
    def spacex_launches_query_url(self) -> str:
        return f"{self.spacex_api_url.rstrip('/')}{self.spacex_launches_query_path}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each caller.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# List-valued settings (default_customers) are read from env as JSON, e.g.
# MISSION_CONTROL_DEFAULT_CUSTOMERS='["ZTM", "NASA", "ESA"]'.
