import sys
from pathlib import Path

import typer

from visitledger.consts import STORE_DATA_DIR, STORE_DIR_NAME


def init() -> None:
    ledger_dir = Path.cwd() / STORE_DIR_NAME
    if ledger_dir.exists():
        print(
            f"Error: Store directory '{ledger_dir}' already exists in this directory.",
            file=sys.stderr,
        )
        raise typer.Exit(code=1)

    store_dir = ledger_dir / STORE_DATA_DIR
    store_dir.mkdir(parents=True, mode=0o700)
    ledger_dir.chmod(0o700)

    # Ignore everything under the store directory
    _ = (ledger_dir / ".gitignore").write_text("*\n", encoding="utf-8")

    print(f"Initialized store: {store_dir}")
