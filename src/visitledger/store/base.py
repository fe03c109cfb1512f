from typing import Protocol


class KeyValueStore(Protocol):
    def get(self, key: str) -> bytes:
        """
        Returns the value stored under key.

        Raises:
            KeyNotFoundError: if nothing is stored under key.
            StoreUnavailableError: on transport failure.
        """
        ...

    def put(self, key: str, value: bytes) -> None:
        """
        Stores value under key, replacing any previous value.

        Raises:
            StoreUnavailableError: on transport failure.
        """
        ...
