"""
udt_resolver.db.models

Mapping of the SQL-standard catalog view listing user-defined types.

Responsibilities:
- Describe `information_schema.user_defined_types` for query construction.
- Let dev/test bootstrap create an equivalent table on SQLite.
"""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from udt_resolver.db.base import Base

CATALOG_SCHEMA = "information_schema"


class UserDefinedType(Base):
    __tablename__ = "user_defined_types"
    __table_args__ = {"schema": CATALOG_SCHEMA}

    # Column names follow the standard view; attribute names stay short.
    catalog: Mapped[str] = mapped_column(
        "user_defined_type_catalog", String(128), primary_key=True
    )
    schema: Mapped[str] = mapped_column(
        "user_defined_type_schema", String(128), primary_key=True
    )
    name: Mapped[str] = mapped_column(
        "user_defined_type_name", String(128), primary_key=True
    )
    # STRUCTURED or DISTINCT
    category: Mapped[str | None] = mapped_column(
        "user_defined_type_category", String(32), nullable=True
    )


# --- Module Notes -----------------------------------------------------------
# Production backends expose this as a read-only view; nothing here writes to it
# outside of `db.init_db`.
