"""
Routes named functions to the index operations.

Function names and argument lists mirror a ledger invocation: a function name
plus a list of string arguments. Every expected failure is returned as a
CommandResult with ok=False.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeAlias

from msgspec import Struct
from pydantic import TypeAdapter, ValidationError

from visitledger.appender import append_record, register_subject
from visitledger.exceptions import InvalidArgumentError, VisitLedgerError
from visitledger.models import SubjectProfile
from visitledger.reconstruct import reconstruct_history
from visitledger.store import KeyValueStore

log = logging.getLogger(__name__)

Handler: TypeAlias = Callable[[KeyValueStore, Sequence[str]], bytes | None]

_profile_adapter = TypeAdapter(SubjectProfile)


class CommandResult(Struct, frozen=True):
    ok: bool
    payload: bytes | None = None
    error: str | None = None
    error_type: str | None = None

    @classmethod
    def success(cls, payload: bytes | None = None) -> CommandResult:
        return cls(ok=True, payload=payload)

    @classmethod
    def failure(cls, error: VisitLedgerError) -> CommandResult:
        return cls(ok=False, error=error.message, error_type=type(error).__name__)


def _expect_args(function: str, args: Sequence[str], names: Sequence[str]) -> None:
    if len(args) != len(names):
        raise InvalidArgumentError(
            f"Incorrect number of arguments for '{function}'. Expecting {len(names)}: {', '.join(names)}"
        )
    if not args[0]:
        raise InvalidArgumentError(f"'{names[0]}' must not be empty.")


def parse_profile(payload: str) -> SubjectProfile:
    """
    Reads a registration payload.

    A JSON object with name/category/description is used as the profile; any
    other payload becomes the description.
    """
    try:
        return _profile_adapter.validate_json(payload)
    except ValidationError:
        return SubjectProfile(description=payload)


def _register_subject(store: KeyValueStore, args: Sequence[str]) -> bytes | None:
    _expect_args("registerSubject", args, ["id", "payload"])
    subject_id, payload = args
    # Registration through dispatch replaces any stored value.
    _ = register_subject(store, subject_id, parse_profile(payload), overwrite=True)
    return None


def _append_record(store: KeyValueStore, args: Sequence[str]) -> bytes | None:
    _expect_args("appendRecord", args, ["id", "payload"])
    subject_id, payload = args
    return append_record(store, subject_id, payload).encode("utf-8")


def _reconstruct_history(store: KeyValueStore, args: Sequence[str]) -> bytes | None:
    _expect_args("reconstructHistory", args, ["id"])
    return reconstruct_history(store, args[0]).encode("utf-8")


HANDLERS: dict[str, Handler] = {
    "registerSubject": _register_subject,
    "appendRecord": _append_record,
    "reconstructHistory": _reconstruct_history,
}

ALIASES: dict[str, str] = {
    "addPatient": "registerSubject",
    "addRecord": "appendRecord",
    "read": "reconstructHistory",
}


def resolve_handler(function: str) -> Handler:
    name = ALIASES.get(function, function)
    try:
        return HANDLERS[name]
    except KeyError:
        raise InvalidArgumentError(f"Received unknown function invocation: {function}") from None


def dispatch(store: KeyValueStore, function: str, args: Sequence[str]) -> CommandResult:
    log.debug("dispatch %s with %d args", function, len(args))
    try:
        handler = resolve_handler(function)
        return CommandResult.success(handler(store, args))
    except VisitLedgerError as e:
        log.debug("dispatch %s failed: %s", function, e.message)
        return CommandResult.failure(e)
