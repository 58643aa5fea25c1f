"""Custom exceptions for the transcript review service."""

from uuid import UUID


class ConfigurationError(Exception):
    """Raised when the backing store is missing settings or unreachable."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class TranscriptNotFoundError(Exception):
    """Raised when a requested transcript does not exist."""

    def __init__(self, transcript_id: UUID | str):
        self.transcript_id = transcript_id
        super().__init__(f"Transcript {transcript_id} not found")


class TranscriptAlreadyApprovedError(Exception):
    """Raised when an approved transcript would be modified."""

    def __init__(self, transcript_id: UUID | str):
        self.transcript_id = transcript_id
        super().__init__(f"Transcript {transcript_id} is already approved")


class TranscriptStoreError(Exception):
    """Raised when an insert, update or delete against the table fails."""

    def __init__(
        self,
        operation: str,
        message: str,
        details: str | None = None,
        hint: str | None = None,
        cause: Exception | None = None,
    ):
        self.operation = operation
        self.message = message
        self.details = details
        self.hint = hint
        self.cause = cause
        super().__init__(f"Transcript {operation} failed: {message}")

    def to_detail(self) -> dict:
        return {
            "operation": self.operation,
            "message": self.message,
            "details": self.details,
            "hint": self.hint,
        }


class FormValidationError(Exception):
    """Raised when required form fields are blank."""

    def __init__(self, missing_fields: list[str]):
        self.missing_fields = missing_fields
        super().__init__(f"Missing required fields: {', '.join(missing_fields)}")

