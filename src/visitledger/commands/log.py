from rich.console import Console
from rich.table import Table
from rich.text import Text

from visitledger.config import open_store
from visitledger.reconstruct import load_history


def log(subject_id: str) -> None:
    store = open_store()
    entries = load_history(store, subject_id)
    console = Console()

    if not entries:
        console.print(f"No records found for subject '{subject_id}'.", markup=False)
        return

    table = Table(
        title=Text(f"Records for {subject_id}"), show_header=True, header_style="bold", box=None, padding=(0, 1)
    )
    table.add_column("ID", justify="right")
    table.add_column("Time")
    table.add_column("Record Snippet", overflow="ellipsis", min_width=20)

    for i, entry in enumerate(entries):
        lines = entry.payload.strip().splitlines()
        snippet = lines[0] if lines else ""
        table.add_row(str(i), Text(entry.label, style="blue"), Text(snippet))

    console.print(table, markup=False)
