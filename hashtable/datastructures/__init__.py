from .bucket import Bucket, Entry
from .chained_map import DEFAULT_BUCKET_COUNT, ChainedMap
from .errors import NOT_FOUND, HashTableError, InvalidCapacity, NotFound
from .hashing import default_hash, fold, string_hash

__all__ = [
    "Bucket",
    "Entry",
    "ChainedMap",
    "DEFAULT_BUCKET_COUNT",
    "HashTableError",
    "InvalidCapacity",
    "NotFound",
    "NOT_FOUND",
    "default_hash",
    "fold",
    "string_hash",
]
