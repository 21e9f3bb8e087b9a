"""Custom exceptions for the history viewer."""


class ViewerError(Exception):
    """Base exception for all dfhv errors."""

    pass


class StorageError(ViewerError):
    """Raised when a table back-end fails to read its data."""

    def __init__(self, message: str, *, table: str = "") -> None:
        super().__init__(message)
        self.table = table


class CollectionNotFoundError(StorageError):
    """Raised when querying a table that does not exist."""

    def __init__(self, table: str) -> None:
        super().__init__(f"Table not found: {table}", table=table)
