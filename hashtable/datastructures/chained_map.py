from __future__ import annotations

import logging
from typing import Callable, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar, Union

from .bucket import Bucket, Entry
from .errors import NOT_FOUND, InvalidCapacity, NotFound
from .hashing import default_hash, fold

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

logger = logging.getLogger(__name__)

# Bucket count used when the caller does not pick one.
DEFAULT_BUCKET_COUNT = 10


class ChainedMap(Generic[K, V]):
    """A fixed-size hash table that resolves collisions by chaining.

    Every bucket is an insertion-ordered :class:`Bucket` of entries. The
    bucket count is fixed at construction; the table never rehashes.

    ``insert`` does not check for an existing key: a second insert of the
    same key appends another entry, and ``lookup`` keeps returning the
    oldest one until it is deleted. Use ``upsert`` for overwrite semantics.

    Misses are reported with the :data:`NOT_FOUND` marker rather than an
    exception, and a key that was deleted reads exactly like one that was
    never inserted.
    """

    __slots__ = ("_buckets", "_size", "_hash")

    def __init__(
        self,
        bucket_count: int = DEFAULT_BUCKET_COUNT,
        hash_function: Optional[Callable[[K], int]] = None,
    ) -> None:
        if isinstance(bucket_count, bool) or not isinstance(bucket_count, int) or bucket_count <= 0:
            logger.warning("Rejected bucket count %r", bucket_count)
            raise InvalidCapacity(bucket_count)
        # Every slot holds a bucket from the start, so no operation checks for None
        self._buckets: List[Bucket[K, V]] = [Bucket() for _ in range(bucket_count)]
        self._size: int = 0
        self._hash: Callable[[K], int] = hash_function or default_hash
        logger.debug("Created chained map with %d buckets", bucket_count)

    # -----------------------------
    # Hashing
    # -----------------------------
    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    def hash(self, key: K) -> int:
        """Return the index of the bucket that holds *key*."""
        raw = self._hash(key)
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise TypeError(f"hash function must return int, got {type(raw).__name__}")
        return fold(raw, len(self._buckets))

    def _bucket_for(self, key: K) -> Bucket[K, V]:
        return self._buckets[self.hash(key)]

    # -----------------------------
    # Core operations
    # -----------------------------
    def insert(self, key: K, value: V) -> None:
        """Append ``(key, value)`` to the key's bucket.

        An entry already stored under *key* is left in place and keeps
        shadowing the new one.
        """
        self._bucket_for(key).append(Entry(key, value))
        self._size += 1

    def lookup(self, key: K) -> Union[V, NotFound]:
        """Return the value of the oldest entry for *key*, or ``NOT_FOUND``."""
        return self._bucket_for(key).find(key)

    def delete(self, key: K) -> Union[V, NotFound]:
        """Remove the oldest entry for *key* and return its value.

        Only that entry's bucket is touched. Returns ``NOT_FOUND`` and leaves
        the table unchanged when the key is absent.
        """
        idx = self.hash(key)
        value = self._buckets[idx].remove_first(key)
        if value is NOT_FOUND:
            logger.debug("Delete missed key %r in bucket %d", key, idx)
            return NOT_FOUND
        self._size -= 1
        logger.debug("Deleted key %r from bucket %d", key, idx)
        return value

    # -----------------------------
    # Map-style helpers
    # -----------------------------
    def upsert(self, key: K, value: V) -> bool:
        """Overwrite the oldest entry for *key*, or insert it.

        Returns True if a new entry was appended; False if an existing one
        was replaced.
        """
        if self._bucket_for(key).replace_first(key, value):
            return False
        self.insert(key, value)
        return True

    def put_if_absent(self, key: K, value: V) -> bool:
        """Insert only when *key* has no entry; return True if inserted."""
        if self.contains(key):
            return False
        self.insert(key, value)
        return True

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Retrieve the value for *key* or return *default*."""
        v = self.lookup(key)
        return default if v is NOT_FOUND else v  # type: ignore[return-value]

    def contains(self, key: K) -> bool:
        return self.lookup(key) is not NOT_FOUND

    def lookup_all(self, key: K) -> List[V]:
        """Every value stored under *key*, oldest first."""
        return self._bucket_for(key).find_all(key)

    def count(self, key: K) -> int:
        return len(self.lookup_all(key))

    # -----------------------------
    # Size and diagnostics
    # -----------------------------
    @property
    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def load_factor(self) -> float:
        """Entries per bucket. Reported only; the table never resizes."""
        return self._size / len(self._buckets)

    def dump(self) -> List[Tuple[int, List[Entry[K, V]]]]:
        """Every bucket in index order, each as a copy of its entries."""
        return [(i, bucket.entries()) for i, bucket in enumerate(self._buckets)]

    def format_dump(self) -> str:
        """Render :meth:`dump` as text, one line per bucket.

        Example::

            position0: is empty
            position1: Jones->Smith->null
        """
        lines = []
        for i, entries in self.dump():
            if not entries:
                lines.append(f"position{i}: is empty")
            else:
                chain = "->".join(str(e.value) for e in entries)
                lines.append(f"position{i}: {chain}->null")
        return "\n".join(lines)

    # -----------------------------
    # Iteration helpers
    # -----------------------------
    def items(self) -> Iterator[Tuple[K, V]]:
        for bucket in self._buckets:
            for entry in bucket:
                yield (entry.key, entry.value)

    def keys(self) -> Iterator[K]:
        for k, _ in self.items():
            yield k

    def values(self) -> Iterator[V]:
        for _, v in self.items():
            yield v

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __getitem__(self, key: K) -> V:
        v = self.lookup(key)
        if v is NOT_FOUND:
            raise KeyError(key)
        return v  # type: ignore[return-value]

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"ChainedMap({self.bucket_count}, [{pairs}])"
