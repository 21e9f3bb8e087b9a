"""Filesystem-based implementation of TableStore."""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator, Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from dfhv.exceptions import CollectionNotFoundError, StorageError
from dfhv.models import PARTITION_KEY

if TYPE_CHECKING:
    from dfhv.query import Predicate

logger = structlog.get_logger()

# Raw lines read per worker-thread hop
READ_BATCH_SIZE = 500


def _next_batch(
    rows: Iterator[dict[str, Any]], keep: Callable[[dict[str, Any]], bool], size: int
) -> tuple[list[dict[str, Any]], bool]:
    """Read up to ``size`` rows, returning the kept ones and whether the table is exhausted."""
    batch: list[dict[str, Any]] = []
    for _ in range(size):
        row = next(rows, None)
        if row is None:
            return batch, True
        if keep(row):
            batch.append(row)
    return batch, False


class FileSystemTableStore:
    """Table store reading JSON-lines exports.

    Reads tables from a data directory, one file per table:
        data/
            ├── DurableFunctionsHubInstances.jsonl
            └── DurableFunctionsHubHistory.jsonl

    Each line holds one entity (``PartitionKey``, ``RowKey``, ``Timestamp``
    and its properties). Lines that are not JSON objects are logged and
    skipped.
    """

    def __init__(self, data_dir: Path) -> None:
        """Initialize the store.

        Args:
            data_dir: Directory containing the ``<Table>.jsonl`` files.
        """
        self._data_dir = Path(data_dir)
        self._log = logger.bind(component="FileSystemTableStore")

    @property
    def data_dir(self) -> Path:
        """Get the data directory."""
        return self._data_dir

    def _table_path(self, name: str) -> Path:
        return self._data_dir / f"{name}.jsonl"

    def _iter_rows(self, name: str) -> Iterator[dict[str, Any]]:
        """Read rows of a table lazily, line by line.

        Args:
            name: Table name.

        Yields:
            Parsed entities.

        Raises:
            CollectionNotFoundError: If the table file does not exist.
            StorageError: If the table file cannot be read.
        """
        path = self._table_path(name)
        if not path.is_file():
            raise CollectionNotFoundError(name)

        try:
            with path.open(encoding="utf-8") as f:
                for line_no, line in enumerate(f, start=1):
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        row = json.loads(line)
                    except json.JSONDecodeError as e:
                        self._log.warning(
                            "Skipping malformed row", table=name, line=line_no, error=str(e)
                        )
                        continue
                    if not isinstance(row, dict):
                        self._log.warning("Skipping non-object row", table=name, line=line_no)
                        continue
                    yield row
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read table {name}: {e}", table=name) from e

    async def _stream(
        self, name: str, keep: Callable[[dict[str, Any]], bool]
    ) -> AsyncIterator[dict[str, Any]]:
        """Stream kept rows, reading the file in batches on a worker thread."""
        rows = self._iter_rows(name)
        try:
            while True:
                batch, exhausted = await asyncio.to_thread(
                    _next_batch, rows, keep, READ_BATCH_SIZE
                )
                for row in batch:
                    yield row
                if exhausted:
                    break
        finally:
            rows.close()

    async def collection_exists(self, name: str) -> bool:
        return self._table_path(name).is_file()

    async def query_by_predicate(
        self, name: str, predicate: Predicate
    ) -> AsyncIterator[dict[str, Any]]:
        self._log.debug("Query", table=name, filter=predicate.to_filter_string())
        async for row in self._stream(name, predicate.matches):
            yield row

    async def query_by_partition_key(
        self, name: str, partition_key: str
    ) -> AsyncIterator[dict[str, Any]]:
        self._log.debug("Partition query", table=name)
        async for row in self._stream(name, lambda row: row.get(PARTITION_KEY) == partition_key):
            yield row
