"""Exceptions raised by the B+ tree."""

from __future__ import annotations


class BPlusTreeError(Exception):
    """Base class for every B+ tree error."""

    default_message = "B+ tree error."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class BuildError(BPlusTreeError):
    """Raised when a tree is built from no data."""

    default_message = "No data received."


class InsertError(BPlusTreeError):
    """Raised when an entry cannot be inserted."""

    default_message = "Insertion failed."