"""
Append-only record index over a get/put key-value store.

Provides:
- Composite record keys (subject id + minute timestamp)
- Subject registration and record appends
- Ordered history reconstruction
- A function-name dispatcher over those operations
"""

from .appender import WriteOrder, append_record, load_subject, register_subject
from .dispatch import CommandResult, dispatch
from .keycodec import TIMESTAMP_WIDTH, extract_timestamp_suffix, make_record_key
from .models import HistoryEntry, Subject, SubjectProfile
from .reconstruct import format_report, load_history, reconstruct_history
from .store import FileStore, KeyValueStore, MemoryStore

__all__ = [
    "TIMESTAMP_WIDTH",
    "WriteOrder",
    "CommandResult",
    "HistoryEntry",
    "Subject",
    "SubjectProfile",
    "KeyValueStore",
    "MemoryStore",
    "FileStore",
    "make_record_key",
    "extract_timestamp_suffix",
    "register_subject",
    "load_subject",
    "append_record",
    "load_history",
    "format_report",
    "reconstruct_history",
    "dispatch",
]
