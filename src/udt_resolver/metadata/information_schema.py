"""
udt_resolver.metadata.information_schema

UdtMetadataSource over the SQL-standard `information_schema.user_defined_types`.

Responsibilities:
- Translate `query_udts` arguments into a SQLAlchemy Core select.
- Stream rows as `TypeDescriptor`s and close the cursor on every exit path.
"""

from __future__ import annotations

from collections.abc import Collection, Iterator

from sqlalchemy import Connection, select

from udt_resolver.db.models import UserDefinedType
from udt_resolver.errors import InvalidArgument
from udt_resolver.metadata.base import TypeDescriptor

_udts = UserDefinedType.__table__


class InformationSchemaUdtSource:
    def __init__(self, connection: Connection) -> None:
        if connection is None:
            raise InvalidArgument("Given connection is null.")
        self._connection = connection

    def query_udts(
        self,
        catalog: str | None,
        schema_pattern: str | None,
        type_name_pattern: str,
        types: Collection[str] | None,
    ) -> Iterator[TypeDescriptor]:
        stmt = select(
            _udts.c.user_defined_type_catalog.label("type_cat"),
            _udts.c.user_defined_type_schema.label("type_schem"),
            _udts.c.user_defined_type_name.label("type_name"),
            _udts.c.user_defined_type_category.label("category"),
        ).where(_udts.c.user_defined_type_name.like(type_name_pattern))
        if catalog is not None:
            stmt = stmt.where(_udts.c.user_defined_type_catalog == catalog)
        if schema_pattern is not None:
            stmt = stmt.where(_udts.c.user_defined_type_schema.like(schema_pattern))
        if types is not None:
            stmt = stmt.where(_udts.c.user_defined_type_category.in_(list(types)))
        stmt = stmt.order_by(
            _udts.c.user_defined_type_category,
            _udts.c.user_defined_type_catalog,
            _udts.c.user_defined_type_schema,
            _udts.c.user_defined_type_name,
        )

        result = self._connection.execute(stmt)
        try:
            for row in result:
                yield TypeDescriptor(
                    type_name=row.type_name,
                    type_cat=row.type_cat,
                    type_schem=row.type_schem,
                    category=row.category,
                )
        finally:
            result.close()


# --- Module Notes -----------------------------------------------------------
# LIKE keeps JDBC pattern semantics (`_` and `%` are wildcards, and some backends
# compare case-insensitively); exact matching is the caller's job.
