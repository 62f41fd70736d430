"""
tests.conftest

Shared fixtures for the resolver test suite.

Responsibilities:
- Provide a SQLite engine with an emulated `information_schema` catalog.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from sqlalchemy import Engine, insert

from udt_resolver.db.init_db import attach_catalog, init_catalog
from udt_resolver.db.models import UserDefinedType
from udt_resolver.db.session import create_engine
from udt_resolver.settings import Settings


@pytest.fixture
def catalog_engine() -> Iterator[Engine]:
    engine = create_engine(Settings(env="test", database_url="sqlite://"))
    attach_catalog(engine)
    init_catalog(engine, settings=Settings(env="test"))
    with engine.begin() as conn:
        conn.execute(
            insert(UserDefinedType.__table__),
            [
                {
                    "user_defined_type_catalog": "PUBLIC",
                    "user_defined_type_schema": "PUBLIC",
                    "user_defined_type_name": "ADDRESS",
                    "user_defined_type_category": "STRUCTURED",
                },
                {
                    "user_defined_type_catalog": "PUBLIC",
                    "user_defined_type_schema": "PUBLIC",
                    "user_defined_type_name": "ADDRESSX",
                    "user_defined_type_category": "STRUCTURED",
                },
                {
                    "user_defined_type_catalog": "PUBLIC",
                    "user_defined_type_schema": "PUBLIC",
                    "user_defined_type_name": "MONEY",
                    "user_defined_type_category": "DISTINCT",
                },
                {
                    "user_defined_type_catalog": "PUBLIC",
                    "user_defined_type_schema": "SALES",
                    "user_defined_type_name": "MONEY",
                    "user_defined_type_category": "DISTINCT",
                },
                {
                    "user_defined_type_catalog": "PUBLIC",
                    "user_defined_type_schema": "SALES",
                    "user_defined_type_name": "MYXTYPE",
                    "user_defined_type_category": "DISTINCT",
                },
            ],
        )
    yield engine
    engine.dispose()


# --- Module Notes -----------------------------------------------------------
# The SQLite catalog uses LIKE, which is case-insensitive there; tests rely on
# that to exercise exact name comparison in the resolver.
