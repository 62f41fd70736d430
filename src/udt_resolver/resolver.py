"""
udt_resolver.resolver

Classifies type names as user-defined types known to a connected database.

Responsibilities:
- Cache confirmed UDT names for the lifetime of a connection.
- Fall back to the metadata source on a cache miss, at most once per name
  under contention.
- Leave unknown names uncached so types created later are still found.
"""

from __future__ import annotations

import threading
from contextlib import ExitStack

from sqlalchemy import Connection

from udt_resolver.classification import UdtClassification
from udt_resolver.errors import InvalidArgument
from udt_resolver.metadata.base import UdtMetadataSource
from udt_resolver.metadata.information_schema import InformationSchemaUdtSource
from udt_resolver.observability.logging import get_logger

log = get_logger(__name__)

SCHEMA_SEPARATOR = "."


class UdtResolver:
    """
    One instance per connection. Safe to share between threads.

    Confirmed names are never evicted; a name the database does not know is
    re-queried on every call.
    """

    def __init__(self, metadata: UdtMetadataSource) -> None:
        if metadata is None:
            raise InvalidArgument("Given connection is null.")
        self._metadata = metadata
        self._type_names: set[str] = set()
        self._lock = threading.Lock()

    @classmethod
    def for_connection(cls, connection: Connection) -> UdtResolver:
        return cls(InformationSchemaUdtSource(connection))

    @property
    def confirmed_names(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._type_names)

    def classify(self, type_name: str) -> UdtClassification:
        # Lock-free fast path; set membership reads are atomic.
        if type_name in self._type_names:
            return UdtClassification.IS_UDT

        with self._lock:
            if type_name in self._type_names:
                return UdtClassification.IS_UDT

            if self._exists_in_database(type_name):
                self._type_names.add(type_name)
                log.debug("udt_confirmed", type_name=type_name)
                return UdtClassification.IS_UDT

        log.debug("udt_not_found", type_name=type_name)
        return UdtClassification.NOT_UDT

    def is_udt(self, type_name: str) -> bool:
        return self.classify(type_name) is UdtClassification.IS_UDT

    def _exists_in_database(self, type_name: str) -> bool:
        schema_name: str | None = None
        if SCHEMA_SEPARATOR in type_name:
            schema_name, _, type_name = type_name.partition(SCHEMA_SEPARATOR)

        descriptors = self._metadata.query_udts(None, schema_name, type_name, None)
        with ExitStack() as stack:
            # Cursor-backed results are released on every exit path.
            close = getattr(descriptors, "close", None)
            if close is not None:
                stack.callback(close)
            for descriptor in descriptors:
                if descriptor.type_name == type_name:
                    return True

        return False


# --- Module Notes -----------------------------------------------------------
# The metadata query runs with the lock held, so lookups of different names
# serialize. Confirmations are rare once the cache is warm.
# Only the first separator splits: "A.B.C" looks up type "B.C" in schema "A",
# where a split on every separator would have looked up "B".
