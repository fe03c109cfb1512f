# pyright: standard
from __future__ import annotations

from datetime import UTC, datetime
from typing_extensions import TypedDict

import msgspec
from msgspec import Struct, field


class SubjectProfile(TypedDict, total=False):
    name: str
    category: str
    description: str


class Subject(Struct):
    """
    A registered subject and the ordered keys of its records.

    Stored as compact JSON under its own id. record_keys only ever grows;
    its order is the append order of the records.
    """

    id: str
    name: str = ""
    category: str = ""
    description: str = ""
    record_keys: list[str] = field(default_factory=list)
    registered_at: str = field(default_factory=lambda: datetime.now(UTC).isoformat())

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Subject.id must not be empty.")

    @classmethod
    def from_profile(cls, subject_id: str, profile: SubjectProfile | None = None) -> Subject:
        profile = profile or {}
        return cls(
            id=subject_id,
            name=profile.get("name", ""),
            category=profile.get("category", ""),
            description=profile.get("description", ""),
        )

    def profile(self) -> SubjectProfile:
        return SubjectProfile(name=self.name, category=self.category, description=self.description)


class HistoryEntry(Struct, frozen=True):
    """One reconstructed record: its key, timestamp suffix, display label and payload text."""

    key: str
    timestamp: str
    label: str
    payload: str


def dumps_subject(subject: Subject) -> bytes:
    """
    Compact single-line JSON for a Subject.
    """
    return msgspec.json.encode(subject)


def load_subject_bytes(data: bytes | str) -> Subject:
    """
    Parse stored bytes into a Subject. Raises msgspec.DecodeError on malformed input.
    """
    return msgspec.json.decode(data, type=Subject)


def dumps_subject_summary(subject: Subject) -> str:
    """Subject fields plus a record_count, as one JSON line."""
    summary = msgspec.structs.asdict(subject)
    summary["record_count"] = len(subject.record_keys)
    return msgspec.json.encode(summary).decode("utf-8")


def dumps_history_entries(entries: list[HistoryEntry]) -> str:
    return msgspec.json.encode(entries).decode("utf-8")
