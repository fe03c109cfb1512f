"""
Subject registration and record appends.

An append is a read-modify-write of the subject followed (or preceded, see
WriteOrder) by a single put of the record payload. The host serializes
operations on the same subject; nothing here locks.
"""

import logging
from datetime import datetime
from enum import Enum

import msgspec

from visitledger.exceptions import (
    CorruptSubjectError,
    InvalidArgumentError,
    KeyNotFoundError,
    SubjectNotFoundError,
)
from visitledger.keycodec import make_record_key, utcnow
from visitledger.models import Subject, SubjectProfile, dumps_subject, load_subject_bytes
from visitledger.store import KeyValueStore

log = logging.getLogger(__name__)


class WriteOrder(str, Enum):
    """
    Which of the two puts of an append happens first.

    RECORD_FIRST: a failed subject put leaves an unindexed record; history stays readable.
    SUBJECT_FIRST: a failed record put leaves a dangling key; reconstruction then fails.
    """

    RECORD_FIRST = "record-first"
    SUBJECT_FIRST = "subject-first"


def _require_subject_id(subject_id: str) -> None:
    if not subject_id:
        raise InvalidArgumentError("Subject id must not be empty.")


def _encode_payload(payload: bytes | str) -> bytes:
    match payload:
        case bytes():
            return payload
        case str():
            return payload.encode("utf-8")
        case _:
            raise InvalidArgumentError(f"Payload must be bytes or str, got {type(payload).__name__}.")


def load_subject(store: KeyValueStore, subject_id: str) -> Subject:
    """
    Loads and decodes the subject stored under subject_id.

    Raises:
        SubjectNotFoundError: nothing is stored under subject_id.
        CorruptSubjectError: the stored bytes are not a Subject, or belong to another id.
    """
    _require_subject_id(subject_id)
    try:
        raw = store.get(subject_id)
    except KeyNotFoundError:
        raise SubjectNotFoundError(subject_id) from None

    try:
        subject = load_subject_bytes(raw)
    except msgspec.DecodeError as e:
        raise CorruptSubjectError(subject_id, e) from e

    if subject.id != subject_id:
        raise CorruptSubjectError(subject_id, f"stored id is '{subject.id}'")
    return subject


def save_subject(store: KeyValueStore, subject: Subject) -> None:
    store.put(subject.id, dumps_subject(subject))


def register_subject(
    store: KeyValueStore,
    subject_id: str,
    profile: SubjectProfile | None = None,
    *,
    overwrite: bool = False,
) -> Subject:
    """
    Writes a well-formed, empty Subject under subject_id.

    Refuses to replace an existing value unless overwrite is set; overwriting
    resets the subject's record list.
    """
    _require_subject_id(subject_id)
    if not overwrite:
        try:
            _ = store.get(subject_id)
        except KeyNotFoundError:
            pass
        else:
            raise InvalidArgumentError(f"Subject '{subject_id}' is already registered.")

    subject = Subject.from_profile(subject_id, profile)
    save_subject(store, subject)
    log.debug("registered subject %s", subject_id)
    return subject


def append_record(
    store: KeyValueStore,
    subject_id: str,
    payload: bytes | str,
    *,
    now: datetime | None = None,
    write_order: WriteOrder = WriteOrder.RECORD_FIRST,
) -> str:
    """
    Appends a record to the subject's history and returns its key.

    The subject must be registered. Nothing is written when it is missing or corrupt.
    """
    new_key = make_record_key(subject_id, now or utcnow())
    data = _encode_payload(payload)

    subject = load_subject(store, subject_id)
    subject.record_keys.append(new_key)

    match write_order:
        case WriteOrder.RECORD_FIRST:
            store.put(new_key, data)
            save_subject(store, subject)
        case WriteOrder.SUBJECT_FIRST:
            save_subject(store, subject)
            store.put(new_key, data)

    log.debug("appended %s to %s (%d records)", new_key, subject_id, len(subject.record_keys))
    return new_key
