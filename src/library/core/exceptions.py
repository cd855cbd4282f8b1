"""Exception hierarchy surfaced by the data-access layer."""


class DataAccessError(Exception):
    """Base exception for all data-access operations."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class NotFoundError(DataAccessError):
    """Raised when a lookup or mutation target does not exist in the store."""

    def __init__(
        self,
        entity: str,
        identifier: object = None,
        cause: Exception | None = None,
    ):
        self.entity = entity
        self.identifier = identifier
        if identifier is None:
            message = f"{entity} not found"
        else:
            message = f"{entity} not found: {identifier!r}"
        super().__init__(message, cause)


class AmbiguousResultError(DataAccessError):
    """Raised when a singleton-result query matched more than one row."""


class ConstraintViolationError(DataAccessError):
    """Raised when the store rejected a write due to a data constraint."""


class StoreUnavailableError(DataAccessError):
    """Raised when a session could not be acquired or the connection failed."""
