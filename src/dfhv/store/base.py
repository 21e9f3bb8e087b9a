"""Protocol definitions for the store layer."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from dfhv.query import Predicate


class TableStore(Protocol):
    """Protocol for read-only table access.

    Implementations can be in-memory, file-backed, or a remote table
    service. The viewer depends only on this interface. Query results are
    lazy, finite and single-use.
    """

    async def collection_exists(self, name: str) -> bool:
        """Check whether a table exists.

        Args:
            name: Table name.

        Returns:
            True if the table exists.
        """
        ...

    def query_by_predicate(
        self, name: str, predicate: Predicate
    ) -> AsyncIterator[dict[str, Any]]:
        """Stream the rows of a table that match a predicate.

        Args:
            name: Table name.
            predicate: Filter built by ``dfhv.query.build``.

        Returns:
            Async iterator of raw rows.
        """
        ...

    def query_by_partition_key(
        self, name: str, partition_key: str
    ) -> AsyncIterator[dict[str, Any]]:
        """Stream every row of one partition.

        Args:
            name: Table name.
            partition_key: Partition to read.

        Returns:
            Async iterator of raw rows.
        """
        ...
