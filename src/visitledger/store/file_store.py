from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import quote, unquote

from visitledger.exceptions import InvalidArgumentError, KeyNotFoundError, StoreUnavailableError
from visitledger.lib.atomic_io import atomic_write_bytes

log = logging.getLogger(__name__)


class FileStore:
    """
    Directory-backed store: one file per key.

    - File names are the percent-encoded key, so any key maps to a single flat file.
    - Writes go through a temp file and os.replace; a reader never sees a half-written value.
    - Every OSError is reported as StoreUnavailableError.
    """

    root: Path

    def __init__(self, root: Path) -> None:
        self.root = root
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreUnavailableError(f"Cannot open store at {root}: {e}") from e

    # ---------- Public API ----------

    def get(self, key: str) -> bytes:
        path = self.path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise KeyNotFoundError(key) from None
        except OSError as e:
            raise StoreUnavailableError(f"Failed to read '{key}' from {self.root}: {e}") from e

    def put(self, key: str, value: bytes) -> None:
        path = self.path_for(key)
        try:
            atomic_write_bytes(path, value)
        except OSError as e:
            raise StoreUnavailableError(f"Failed to write '{key}' to {self.root}: {e}") from e
        log.debug("put %s -> %s (%d bytes)", key, path.name, len(value))

    def keys(self) -> list[str]:
        """Lists stored keys. Diagnostics only; the index never scans."""
        try:
            names = [entry.name for entry in self.root.iterdir() if entry.is_file() and ".tmp" not in entry.name]
        except OSError as e:
            raise StoreUnavailableError(f"Failed to list {self.root}: {e}") from e
        return sorted(unquote(name) for name in names)

    # ---------- Helpers ----------

    def path_for(self, key: str) -> Path:
        if not key:
            raise InvalidArgumentError("Store keys must not be empty.")
        # Dots are escaped too so names never collide with temp files or "." and "..".
        return self.root / quote(key, safe="").replace(".", "%2E")
