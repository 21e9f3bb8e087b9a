"""In-memory implementation of TableStore."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterable
from typing import TYPE_CHECKING, Any

from dfhv.exceptions import CollectionNotFoundError
from dfhv.models import PARTITION_KEY

if TYPE_CHECKING:
    from dfhv.query import Predicate


class MemoryTableStore:
    """Table store backed by plain dicts.

    Rows are kept in insertion order and copied on the way out, so callers
    cannot change stored data.
    """

    def __init__(self, tables: dict[str, Iterable[dict[str, Any]]] | None = None) -> None:
        self._tables: dict[str, list[dict[str, Any]]] = {
            name: [dict(row) for row in rows] for name, rows in (tables or {}).items()
        }

    def _rows(self, name: str) -> list[dict[str, Any]]:
        try:
            return self._tables[name]
        except KeyError:
            raise CollectionNotFoundError(name) from None

    async def collection_exists(self, name: str) -> bool:
        return name in self._tables

    async def query_by_predicate(
        self, name: str, predicate: Predicate
    ) -> AsyncIterator[dict[str, Any]]:
        for row in self._rows(name):
            if predicate.matches(row):
                yield dict(row)

    async def query_by_partition_key(
        self, name: str, partition_key: str
    ) -> AsyncIterator[dict[str, Any]]:
        for row in self._rows(name):
            if row.get(PARTITION_KEY) == partition_key:
                yield dict(row)
