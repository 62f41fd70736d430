"""
udt_resolver.metadata.base

Contract between the resolver and whatever enumerates UDTs in a database.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """
    One row of a UDT metadata query (JDBC `getUDTs` shape).
    """

    type_name: str
    type_cat: str | None = None
    type_schem: str | None = None
    category: str | None = None


@runtime_checkable
class UdtMetadataSource(Protocol):
    def query_udts(
        self,
        catalog: str | None,
        schema_pattern: str | None,
        type_name_pattern: str,
        types: Collection[str] | None,
    ) -> Iterable[TypeDescriptor]:
        """
        Enumerate UDTs matching the given patterns. `None` means "any".

        The result may be a plain sequence or a lazy, single-pass iterator.
        When it has a `close()` method, callers call it once they stop reading.
        Patterns may match more than the literal name, so callers compare
        `type_name` themselves.
        """
        ...


# --- Module Notes -----------------------------------------------------------
# The bundled source returns a generator, whose `close()` releases the cursor.
