"""
udt_resolver.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the database and logging layers.
- Offer a cached settings instance for composition roots.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="UDT_", case_sensitive=False)

    # `prod` disables the SQLite catalog bootstrap (`db.init_db.init_catalog`).
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "udt-resolver"
    log_level: str = "INFO"
    json_logs: bool = True

    # Persistence
    database_url: str = "sqlite:///./udt.db"
    pool_pre_ping: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The resolver itself takes no settings; only engine and logging setup read them.
