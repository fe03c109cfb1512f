"""
Rebuilds a subject's history from its record keys.

Reconstruction is all-or-nothing: a single unresolvable key fails the whole
operation and no partial report is produced.
"""

import logging
from collections.abc import Sequence

from visitledger.appender import load_subject
from visitledger.exceptions import CorruptSubjectError, InvalidArgumentError, KeyNotFoundError, RecordNotFoundError
from visitledger.keycodec import extract_timestamp_suffix, format_timestamp_label
from visitledger.models import HistoryEntry
from visitledger.store import KeyValueStore

log = logging.getLogger(__name__)


def load_history(store: KeyValueStore, subject_id: str) -> list[HistoryEntry]:
    """
    Returns one HistoryEntry per key in the subject's record list, in append order.

    Raises:
        SubjectNotFoundError / CorruptSubjectError: from loading the subject.
        RecordNotFoundError: a listed key has no stored record.
    """
    subject = load_subject(store, subject_id)

    entries: list[HistoryEntry] = []
    for key in subject.record_keys:
        try:
            timestamp = extract_timestamp_suffix(key)
        except InvalidArgumentError as e:
            raise CorruptSubjectError(subject_id, e.message) from e

        try:
            raw = store.get(key)
        except KeyNotFoundError:
            raise RecordNotFoundError(key) from None

        entries.append(
            HistoryEntry(
                key=key,
                timestamp=timestamp,
                label=format_timestamp_label(timestamp),
                payload=raw.decode("utf-8", errors="replace"),
            )
        )

    log.debug("reconstructed %d records for %s", len(entries), subject_id)
    return entries


def format_report(entries: Sequence[HistoryEntry]) -> str:
    """
    One '<label>: <payload>' line per entry, in the given order.
    """
    return "\n".join(f"{entry.label}: {entry.payload}" for entry in entries)


def reconstruct_history(store: KeyValueStore, subject_id: str) -> str:
    return format_report(load_history(store, subject_id))
