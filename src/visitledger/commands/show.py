from rich.console import Console
from rich.table import Table
from rich.text import Text

from visitledger.appender import load_subject
from visitledger.config import open_store
from visitledger.models import dumps_subject_summary


def show(subject_id: str, json_output: bool) -> None:
    store = open_store()
    subject = load_subject(store, subject_id)

    if json_output:
        print(dumps_subject_summary(subject))
        return

    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("ID", Text(subject.id))
    table.add_row("Name", Text(subject.name))
    table.add_row("Category", Text(subject.category))
    table.add_row("Description", Text(subject.description))
    table.add_row("Registered", Text(subject.registered_at))
    table.add_row("Records", str(len(subject.record_keys)))
    Console().print(table, markup=False)
