"""
tests.fakes

In-memory metadata sources used by the resolver tests.

Responsibilities:
- Record every metadata query and the cursor handed back for it.
- Offer a source that returns a plain list, with nothing to close.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Collection, Iterator

from udt_resolver.metadata.base import TypeDescriptor


class RecordingCursor:
    def __init__(self, descriptors: list[TypeDescriptor], error: Exception | None) -> None:
        self._descriptors = iter(descriptors)
        self._error = error
        self.closed = False

    def __iter__(self) -> RecordingCursor:
        return self

    def __next__(self) -> TypeDescriptor:
        if self._error is not None:
            raise self._error
        return next(self._descriptors)

    def close(self) -> None:
        self.closed = True


class FakeMetadataSource:
    """
    Maps schema -> type names. Every call is recorded along with its cursor.
    """

    def __init__(
        self,
        types: dict[str, list[str]] | None = None,
        *,
        error: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        self.types = types or {}
        self.error = error
        self.delay = delay
        self.calls: list[tuple[str | None, str | None, str, Collection[str] | None]] = []
        self.cursors: list[RecordingCursor] = []
        self._calls_lock = threading.Lock()

    def query_udts(
        self,
        catalog: str | None,
        schema_pattern: str | None,
        type_name_pattern: str,
        types: Collection[str] | None,
    ) -> Iterator[TypeDescriptor]:
        with self._calls_lock:
            self.calls.append((catalog, schema_pattern, type_name_pattern, types))
        if self.delay:
            time.sleep(self.delay)

        # Loose prefix matching stands in for LIKE: near matches come back too.
        rows = [
            TypeDescriptor(type_name=name, type_schem=schema)
            for schema, names in self.types.items()
            if schema_pattern is None or schema == schema_pattern
            for name in names
            if name.startswith(type_name_pattern)
        ]
        cursor = RecordingCursor(rows, self.error)
        self.cursors.append(cursor)
        return cursor



class ListMetadataSource:
    def __init__(self, names: list[str]) -> None:
        self.names = names
        self.calls = 0

    def query_udts(
        self,
        catalog: str | None,
        schema_pattern: str | None,
        type_name_pattern: str,
        types: Collection[str] | None,
    ) -> list[TypeDescriptor]:
        self.calls += 1
        return [TypeDescriptor(type_name=name) for name in self.names]
