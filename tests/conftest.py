# pyright: standard
from collections.abc import Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from visitledger.appender import register_subject
from visitledger.consts import STORE_DATA_DIR, STORE_DIR_NAME
from visitledger.models import SubjectProfile
from visitledger.store import MemoryStore

runner = CliRunner()


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def registered_store(store: MemoryStore) -> MemoryStore:
    """A store with subject 'p1' registered and no records."""
    _ = register_subject(store, "p1", SubjectProfile(name="Ada", category="outpatient", description="seasonal"))
    return store


@pytest.fixture
def store_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Runs the test inside an isolated directory with an initialized store."""
    monkeypatch.delenv("VISITLEDGER_STORE_DIR", raising=False)
    with runner.isolated_filesystem(temp_dir=tmp_path) as td:
        data_dir = Path(td) / STORE_DIR_NAME / STORE_DATA_DIR
        data_dir.mkdir(parents=True)
        yield data_dir
