"""
Composite record keys.

A record key is the subject id followed by a fixed-width, lexicographically
sortable timestamp. The width is fixed so the timestamp can be sliced back off
the end of the key without a delimiter.
"""

from datetime import UTC, datetime

from visitledger.exceptions import InvalidArgumentError

TIMESTAMP_FORMAT = "%Y%m%d%H%M"
TIMESTAMP_WIDTH = 12
LABEL_FORMAT = "%Y-%m-%d %H:%M"


def utcnow() -> datetime:
    return datetime.now(UTC)


def make_record_key(subject_id: str, now: datetime) -> str:
    """
    Builds the storage key for a record appended to `subject_id` at `now`.

    Minute resolution: two appends to one subject within the same minute
    produce the same key.
    """
    if not subject_id:
        raise InvalidArgumentError("Subject id must not be empty.")
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return subject_id + now.astimezone(UTC).strftime(TIMESTAMP_FORMAT)


def extract_timestamp_suffix(record_key: str) -> str:
    """Returns the timestamp part of a record key."""
    if len(record_key) <= TIMESTAMP_WIDTH:
        raise InvalidArgumentError(
            f"Record key '{record_key}' is too short to carry a {TIMESTAMP_WIDTH}-character timestamp."
        )
    return record_key[-TIMESTAMP_WIDTH:]


def format_timestamp_label(suffix: str) -> str:
    """Renders a timestamp suffix as 'YYYY-MM-DD HH:MM', or returns it unchanged if it does not parse."""
    try:
        return datetime.strptime(suffix, TIMESTAMP_FORMAT).strftime(LABEL_FORMAT)
    except ValueError:
        return suffix
