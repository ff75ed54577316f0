"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - The Redis credential comes from the environment (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - Redis variables keep their deployment names: REDIS_URI (host), REDIS_PORT, REDIS_PASS
    - notification_backend="memory" runs without Redis (single process only)
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FIXTURE = Path(__file__).resolve().parent / "fixtures" / "seed.json"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Notification bus
    notification_backend: Literal["redis", "memory"] = "redis"
    redis_uri: str = "localhost"
    redis_port: int = 6379
    redis_pass: str | None = None
    redis_backoff_step_ms: int = 50
    redis_backoff_cap_ms: int = 2000
    redis_max_pending_publishes: int = 10_000

    # Seed data
    fixture_path: Path = DEFAULT_FIXTURE

    # Server
    host: str = "0.0.0.0"
    port: int = 4000
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
