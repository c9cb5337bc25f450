from __future__ import annotations
from typing import Generic, Iterator, List, NamedTuple, Optional, TypeVar, Union

from .errors import NOT_FOUND, NotFound

K = TypeVar("K")
V = TypeVar("V")


class Entry(NamedTuple, Generic[K, V]):
    """An immutable (key, value) pair stored in a bucket."""

    key: K
    value: V


class _Node(Generic[K, V]):
    """A lightweight node for a singly-linked chain of entries."""

    __slots__ = ("entry", "next")

    def __init__(self, entry: Entry[K, V], next: Optional["_Node[K, V]"] = None) -> None:
        self.entry = entry
        self.next = next


class Bucket(Generic[K, V]):
    """Singly-linked list of :class:`Entry` kept in insertion order.

    Appends go to the tail in O(1); searches and removals scan from the
    head and stop at the first entry whose key compares equal. Removing an
    entry never moves or touches any other entry.
    """

    __slots__ = ("head", "tail", "_size")

    def __init__(self) -> None:
        self.head: Optional[_Node[K, V]] = None
        self.tail: Optional[_Node[K, V]] = None
        self._size: int = 0

    def append(self, entry: Entry[K, V]) -> None:
        """Add *entry* after the current last entry."""
        node = _Node(entry)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def find(self, key: K) -> Union[V, NotFound]:
        """Return the value of the first entry for *key*, or ``NOT_FOUND``."""
        n = self.head
        while n:
            if n.entry.key == key:
                return n.entry.value
            n = n.next
        return NOT_FOUND

    def find_all(self, key: K) -> List[V]:
        """Return every value stored under *key*, oldest first."""
        found: List[V] = []
        n = self.head
        while n:
            if n.entry.key == key:
                found.append(n.entry.value)
            n = n.next
        return found

    def remove_first(self, key: K) -> Union[V, NotFound]:
        """Unlink the first entry for *key* and return its value.

        Returns ``NOT_FOUND`` and leaves the chain untouched when no entry
        matches.
        """
        prev: Optional[_Node[K, V]] = None
        cur = self.head
        while cur:
            if cur.entry.key == key:
                if prev:
                    prev.next = cur.next
                else:
                    self.head = cur.next
                if cur is self.tail:
                    self.tail = prev
                self._size -= 1
                return cur.entry.value
            prev, cur = cur, cur.next
        return NOT_FOUND

    def replace_first(self, key: K, value: V) -> bool:
        """Swap the first entry for *key* with ``Entry(key, value)``.

        The new entry takes the old one's position in the chain. Returns
        False if no entry matched.
        """
        n = self.head
        while n:
            if n.entry.key == key:
                n.entry = Entry(key, value)
                return True
            n = n.next
        return False

    def entries(self) -> List[Entry[K, V]]:
        """Snapshot of the chain as a new list."""
        return list(self)

    def __iter__(self) -> Iterator[Entry[K, V]]:
        n = self.head
        while n:
            yield n.entry
            n = n.next

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return "Bucket([" + ", ".join(repr(e) for e in self) + "])"
