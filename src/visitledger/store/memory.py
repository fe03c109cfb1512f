import logging

from visitledger.exceptions import KeyNotFoundError

log = logging.getLogger(__name__)


class MemoryStore:
    """Dict-backed store. Values are copied to bytes on write."""

    _data: dict[str, bytes]

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._data = dict(initial or {})

    def get(self, key: str) -> bytes:
        try:
            return self._data[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def put(self, key: str, value: bytes) -> None:
        log.debug("put %s (%d bytes)", key, len(value))
        self._data[key] = bytes(value)

    def keys(self) -> list[str]:
        return sorted(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
