class VisitLedgerError(Exception):
    """Base exception for all expected visitledger errors."""

    message: str
    exit_code: int

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class ConfigurationError(VisitLedgerError):
    """Configuration related errors (env vars, store discovery)."""


class InvalidArgumentError(VisitLedgerError):
    """Wrong arity, empty identifiers and other caller input errors."""


class SubjectNotFoundError(VisitLedgerError):
    """No value is stored under the subject identifier."""

    def __init__(self, subject_id: str) -> None:
        super().__init__(f"Subject '{subject_id}' is not registered.")
        self.subject_id = subject_id


class RecordNotFoundError(VisitLedgerError):
    """A key listed in a subject's history does not resolve to a record."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Record '{key}' is referenced but missing from the store.")
        self.key = key


class CorruptSubjectError(VisitLedgerError):
    """The bytes stored under a subject id are not a valid subject."""

    def __init__(self, subject_id: str, details: object | None = None) -> None:
        msg = f"Stored value for subject '{subject_id}' is not a valid subject"
        if details is not None:
            msg = f"{msg} ({details})"
        super().__init__(msg)
        self.subject_id = subject_id
        self.details = details


class StoreUnavailableError(VisitLedgerError):
    """Transport-level failure reported by the underlying store."""


class KeyNotFoundError(VisitLedgerError):
    """Raised by a store when a key is absent."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Key '{key}' not found.")
        self.key = key
