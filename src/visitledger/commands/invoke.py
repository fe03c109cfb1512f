import sys

from visitledger.config import open_store
from visitledger.dispatch import dispatch
from visitledger.exceptions import VisitLedgerError


def invoke(function: str, args: list[str]) -> None:
    store = open_store()
    result = dispatch(store, function, args)
    if not result.ok:
        raise VisitLedgerError(f"{result.error_type}: {result.error}")

    if result.payload:
        _ = sys.stdout.write(result.payload.decode("utf-8"))
        _ = sys.stdout.write("\n")
