class CallTrackerError(Exception):
    """Base class for errors raised by the record store."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CallTrackerError):
    """A required field is missing or empty."""


class StorageError(CallTrackerError):
    """The database rejected or failed a statement."""
