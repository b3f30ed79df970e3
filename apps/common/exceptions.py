"""Errors raised by the record services."""


class RecordServiceError(Exception):
    """Base exception for record services."""
    pass


class RecordValidationError(RecordServiceError):
    """
    Raised when the model's own validation rejects a record at save time.

    ``errors`` holds one field error item per failed constraint.
    """

    def __init__(self, errors):
        self.errors = errors
        super().__init__(f"{len(errors)} field(s) failed validation")


class RecordPersistenceError(RecordServiceError):
    """Raised when the database refuses a write for any other reason."""
    pass
