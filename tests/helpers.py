# pyright: standard
from collections.abc import Callable
from datetime import UTC, datetime

from pytest_mock import MockerFixture

from visitledger.exceptions import StoreUnavailableError
from visitledger.store import MemoryStore


def at_minute(minute: int, hour: int = 9) -> datetime:
    """A UTC datetime on 2026-10-19 at hour:minute."""
    return datetime(2026, 10, 19, hour, minute, tzinfo=UTC)


def fail_puts(mocker: MockerFixture, store: MemoryStore, should_fail: Callable[[str], bool]) -> None:
    """Makes store.put raise StoreUnavailableError for keys matching should_fail; other puts go through."""
    real_put = store.put

    def put(key: str, value: bytes) -> None:
        if should_fail(key):
            raise StoreUnavailableError(f"simulated outage writing '{key}'")
        real_put(key, value)

    _ = mocker.patch.object(store, "put", side_effect=put)


def snapshot(store: MemoryStore) -> dict[str, bytes]:
    return {key: store.get(key) for key in store.keys()}
