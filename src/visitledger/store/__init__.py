"""
Key-value stores the index is layered on.

The index only ever calls get(key) and put(key, value); there are no range
scans or secondary indexes.
"""

from .base import KeyValueStore
from .file_store import FileStore
from .memory import MemoryStore

__all__ = [
    "KeyValueStore",
    "FileStore",
    "MemoryStore",
]
