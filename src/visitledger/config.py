import os
from pathlib import Path

from visitledger.consts import STORE_DATA_DIR, STORE_DIR_ENV_VAR, STORE_DIR_NAME
from visitledger.exceptions import ConfigurationError
from visitledger.store import FileStore


def find_store_dir() -> Path | None:
    """
    Locates the store directory by checking VISITLEDGER_STORE_DIR or searching parents.
    """
    if env_path := os.environ.get(STORE_DIR_ENV_VAR):
        path = Path(env_path)
        if not path.is_absolute():
            raise ConfigurationError(f"{STORE_DIR_ENV_VAR} must be an absolute path")
        if not path.is_dir():
            raise ConfigurationError(f"Store directory specified in {STORE_DIR_ENV_VAR} does not exist: {path}")
        return path

    current = Path.cwd()
    for parent in [current, *current.parents]:
        check = parent / STORE_DIR_NAME / STORE_DATA_DIR
        if check.is_dir():
            return check
    return None


def open_store() -> FileStore:
    store_dir = find_store_dir()
    if store_dir is None:
        raise ConfigurationError("No store found. Please run 'visitledger init' first.")
    return FileStore(store_dir)
