"""Store layer exports."""

from dfhv.store.base import TableStore
from dfhv.store.filesystem import FileSystemTableStore
from dfhv.store.memory import MemoryTableStore

__all__ = [
    "TableStore",
    "FileSystemTableStore",
    "MemoryTableStore",
]
