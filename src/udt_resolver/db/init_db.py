"""
udt_resolver.db.init_db

Catalog bootstrap helpers (dev/test convenience).

Responsibilities:
- Emulate `information_schema.user_defined_types` on SQLite, which has no
  catalog views of its own.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Engine, event

from udt_resolver.db.base import Base
from udt_resolver.db.models import CATALOG_SCHEMA
from udt_resolver.settings import Settings


def attach_catalog(engine: Engine) -> None:
    """
    Attach an in-memory `information_schema` database to every new SQLite
    connection. Must run before the engine hands out its first connection.
    """

    if engine.dialect.name != "sqlite":
        raise ValueError(f"catalog emulation is SQLite-only, got {engine.dialect.name!r}")

    @event.listens_for(engine, "connect")
    def _attach(dbapi_connection: Any, _: Any) -> None:
        dbapi_connection.execute(f"ATTACH DATABASE ':memory:' AS {CATALOG_SCHEMA}")


def init_catalog(engine: Engine, *, settings: Settings) -> None:
    if settings.env == "prod":
        raise RuntimeError("catalog bootstrap is disabled when env=prod")

    # Use a transactional DDL block when supported by the backend.
    with engine.begin() as conn:
        Base.metadata.create_all(conn)


# --- Module Notes -----------------------------------------------------------
# Real databases (PostgreSQL, HSQLDB, ...) provide the view natively; do not call
# these helpers against them.
