"""Error types and result markers shared by the hash table modules."""

from __future__ import annotations


class HashTableError(Exception):
    """Base class for errors raised by the hash table package."""


class InvalidCapacity(HashTableError, ValueError):
    """Raised when a table is constructed with a non-positive bucket count."""

    def __init__(self, bucket_count: object) -> None:
        super().__init__(f"bucket_count must be a positive integer, got {bucket_count!r}")
        self.bucket_count = bucket_count


class NotFound:
    """Marker returned by lookups and deletes when no entry matches.

    There is a single instance, :data:`NOT_FOUND`; compare with ``is``.
    It is falsy so ``if table.lookup(k):`` style checks still read naturally,
    but a stored falsy value (``0``, ``""``, ``None``) is never confused with
    it when compared by identity.
    """

    __slots__ = ()
    _instance: "NotFound | None" = None

    def __new__(cls) -> "NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __reduce__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFound()
