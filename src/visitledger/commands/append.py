import sys

from visitledger.appender import append_record
from visitledger.config import open_store
from visitledger.console import is_input_terminal
from visitledger.exceptions import InvalidArgumentError


def _read_payload(cli_payload: str | None) -> str:
    if cli_payload is not None:
        return cli_payload
    if not is_input_terminal():
        piped = sys.stdin.read()
        if piped:
            return piped
    raise InvalidArgumentError("A record payload is required, either as an argument or via stdin.")


def append(subject_id: str, cli_payload: str | None) -> None:
    payload = _read_payload(cli_payload)
    store = open_store()
    new_key = append_record(store, subject_id, payload)
    print(new_key)
