from __future__ import annotations

from typing import Hashable

# 31-polynomial string hash, wrapped to a signed 32-bit integer.
HASH_MULTIPLIER = 31
_MASK_32 = 0xFFFFFFFF
_SIGN_BIT_32 = 0x80000000


def string_hash(key: str) -> int:
    """Return a process-independent hash of *key*.

    Computes ``h = 31 * h + unit`` over the UTF-16 code units of the string
    and wraps the result to a signed 32-bit integer, so the value can be
    negative. Unlike the built-in ``hash(str)``, the result does not change
    between interpreter runs, which keeps bucket layouts reproducible.

    >>> string_hash("")
    0
    >>> string_hash("a")
    97
    >>> string_hash("Wilson")
    -1703929960
    """
    # lone surrogates are hashed as ordinary code units
    data = key.encode("utf-16-be", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        unit = (data[i] << 8) | data[i + 1]
        h = (h * HASH_MULTIPLIER + unit) & _MASK_32
    return h - (1 << 32) if h & _SIGN_BIT_32 else h


def default_hash(key: Hashable) -> int:
    """Stable hash for ``str`` keys, built-in ``hash`` for everything else."""
    if isinstance(key, str):
        return string_hash(key)
    return hash(key)


def fold(raw_hash: int, bucket_count: int) -> int:
    """Map any integer hash (negative included) into ``[0, bucket_count)``."""
    return abs(raw_hash) % bucket_count
