from visitledger.config import open_store
from visitledger.models import dumps_history_entries
from visitledger.reconstruct import format_report, load_history


def history(subject_id: str, json_output: bool) -> None:
    store = open_store()
    entries = load_history(store, subject_id)

    if json_output:
        print(dumps_history_entries(entries))
        return

    report = format_report(entries)
    if report:
        print(report)
