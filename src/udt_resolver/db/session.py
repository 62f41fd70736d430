"""
udt_resolver.db.session

SQLAlchemy engine + connection helpers.

Responsibilities:
- Create the engine from settings.
- Provide a connection scope for code that owns a connection's lifecycle.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Connection, Engine
from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool

from udt_resolver.settings import Settings


def create_engine(settings: Settings) -> Engine:
    url = make_url(settings.database_url)
    kwargs: dict[str, Any] = {"pool_pre_ping": settings.pool_pre_ping}
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        # One shared in-memory database, reachable from every thread.
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    return sa_create_engine(url, **kwargs)


@contextmanager
def connection_scope(engine: Engine) -> Iterator[Connection]:
    """
    Explicit connection scope. A resolver built on the yielded connection must
    not outlive the block.
    """

    with engine.connect() as connection:
        yield connection


# --- Module Notes -----------------------------------------------------------
# Resolvers borrow connections; opening and closing them stays with the caller.
