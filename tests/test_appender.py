# pyright: standard
import pytest
from pytest_mock import MockerFixture

from tests.helpers import at_minute, fail_puts, snapshot
from visitledger.appender import WriteOrder, append_record, load_subject, register_subject
from visitledger.exceptions import (
    CorruptSubjectError,
    InvalidArgumentError,
    RecordNotFoundError,
    StoreUnavailableError,
    SubjectNotFoundError,
)
from visitledger.models import SubjectProfile
from visitledger.reconstruct import reconstruct_history
from visitledger.store import MemoryStore


def test_register_writes_a_well_formed_empty_subject(store: MemoryStore) -> None:
    # WHEN a subject is registered
    subject = register_subject(store, "p1", SubjectProfile(name="Ada", category="outpatient"))

    # THEN the stored value decodes to a Subject with no records and the given profile
    loaded = load_subject(store, "p1")
    assert loaded == subject
    assert loaded.record_keys == []
    assert loaded.name == "Ada"
    assert loaded.category == "outpatient"


def test_register_refuses_to_overwrite_without_flag(registered_store: MemoryStore) -> None:
    _ = append_record(registered_store, "p1", "flu, mild", now=at_minute(1))

    with pytest.raises(InvalidArgumentError):
        _ = register_subject(registered_store, "p1", SubjectProfile(name="Other"))

    # The existing history is untouched
    assert len(load_subject(registered_store, "p1").record_keys) == 1


def test_register_with_overwrite_resets_the_subject(registered_store: MemoryStore) -> None:
    _ = append_record(registered_store, "p1", "flu, mild", now=at_minute(1))

    _ = register_subject(registered_store, "p1", SubjectProfile(name="Other"), overwrite=True)

    loaded = load_subject(registered_store, "p1")
    assert loaded.name == "Other"
    assert loaded.record_keys == []


def test_register_rejects_empty_id(store: MemoryStore) -> None:
    with pytest.raises(InvalidArgumentError):
        _ = register_subject(store, "")
    assert len(store) == 0


def test_append_stores_payload_and_indexes_its_key(registered_store: MemoryStore) -> None:
    # WHEN a record is appended
    key = append_record(registered_store, "p1", b"flu, mild", now=at_minute(5))

    # THEN the key is the composite key, it resolves to the payload, and it is indexed
    assert key == "p1202610190905"
    assert registered_store.get(key) == b"flu, mild"
    assert load_subject(registered_store, "p1").record_keys == [key]


def test_append_accepts_text_payloads(registered_store: MemoryStore) -> None:
    key = append_record(registered_store, "p1", "fièvre", now=at_minute(5))
    assert registered_store.get(key) == "fièvre".encode()


def test_append_keeps_keys_in_append_order(registered_store: MemoryStore) -> None:
    keys = [append_record(registered_store, "p1", f"visit {i}", now=at_minute(i)) for i in range(5)]
    assert load_subject(registered_store, "p1").record_keys == keys


def test_append_preserves_profile_fields(registered_store: MemoryStore) -> None:
    _ = append_record(registered_store, "p1", "x", now=at_minute(1))
    assert load_subject(registered_store, "p1").profile() == {
        "name": "Ada",
        "category": "outpatient",
        "description": "seasonal",
    }


def test_append_to_unregistered_subject_writes_nothing(store: MemoryStore) -> None:
    # GIVEN an empty store
    # WHEN appending to an unknown subject
    with pytest.raises(SubjectNotFoundError) as exc_info:
        _ = append_record(store, "ghost", "flu", now=at_minute(1))

    # THEN no orphan record is written
    assert exc_info.value.subject_id == "ghost"
    assert len(store) == 0


def test_append_to_corrupt_subject_fails_without_writing(store: MemoryStore) -> None:
    # GIVEN a subject id holding a freeform blob instead of a Subject
    store.put("p1", b"name=Ada")
    before = snapshot(store)

    # WHEN appending
    with pytest.raises(CorruptSubjectError):
        _ = append_record(store, "p1", "flu", now=at_minute(1))

    # THEN the store is unchanged
    assert snapshot(store) == before


def test_append_rejects_a_subject_stored_under_another_id(store: MemoryStore) -> None:
    _ = register_subject(store, "p1")
    store.put("p2", store.get("p1"))

    with pytest.raises(CorruptSubjectError):
        _ = append_record(store, "p2", "flu", now=at_minute(1))


def test_append_rejects_empty_subject_id(store: MemoryStore) -> None:
    with pytest.raises(InvalidArgumentError):
        _ = append_record(store, "", "flu", now=at_minute(1))


def test_same_minute_appends_collide(registered_store: MemoryStore) -> None:
    # GIVEN two appends to the same subject within one minute
    first = append_record(registered_store, "p1", "flu, mild", now=at_minute(7).replace(second=1))
    second = append_record(registered_store, "p1", "flu, resolved", now=at_minute(7).replace(second=59))

    # THEN both get the same key, the second payload overwrites the first,
    # and the key is listed twice
    assert first == second
    assert registered_store.get(first) == b"flu, resolved"
    assert load_subject(registered_store, "p1").record_keys == [first, first]

    # AND the report shows the newer payload twice
    assert reconstruct_history(registered_store, "p1") == (
        "2026-10-19 09:07: flu, resolved\n2026-10-19 09:07: flu, resolved"
    )


def test_record_first_failure_leaves_history_readable(registered_store: MemoryStore, mocker: MockerFixture) -> None:
    # GIVEN one good record and a store that fails to write the subject
    _ = append_record(registered_store, "p1", "flu, mild", now=at_minute(1))
    fail_puts(mocker, registered_store, lambda key: key == "p1")

    # WHEN a second append fails on the subject write
    with pytest.raises(StoreUnavailableError):
        _ = append_record(registered_store, "p1", "flu, resolved", now=at_minute(2))

    # THEN the payload exists as an unindexed record
    assert registered_store.get("p1202610190902") == b"flu, resolved"
    # AND the history still reconstructs without it
    assert reconstruct_history(registered_store, "p1") == "2026-10-19 09:01: flu, mild"


def test_subject_first_failure_leaves_a_dangling_key(registered_store: MemoryStore, mocker: MockerFixture) -> None:
    # GIVEN a store that fails to write record payloads
    fail_puts(mocker, registered_store, lambda key: key != "p1")

    # WHEN appending in the historical order
    with pytest.raises(StoreUnavailableError):
        _ = append_record(
            registered_store, "p1", "flu, mild", now=at_minute(1), write_order=WriteOrder.SUBJECT_FIRST
        )

    # THEN the key is indexed but missing, and reconstruction fails as a whole
    assert load_subject(registered_store, "p1").record_keys == ["p1202610190901"]
    with pytest.raises(RecordNotFoundError) as exc_info:
        _ = reconstruct_history(registered_store, "p1")
    assert exc_info.value.key == "p1202610190901"


def test_subject_first_success_matches_record_first(registered_store: MemoryStore) -> None:
    key = append_record(registered_store, "p1", "flu", now=at_minute(1), write_order=WriteOrder.SUBJECT_FIRST)

    assert registered_store.get(key) == b"flu"
    assert load_subject(registered_store, "p1").record_keys == [key]


def test_append_uses_current_time_by_default(registered_store: MemoryStore, mocker: MockerFixture) -> None:
    _ = mocker.patch("visitledger.appender.utcnow", return_value=at_minute(30, hour=17))

    key = append_record(registered_store, "p1", "flu")

    assert key == "p1202610191730"
