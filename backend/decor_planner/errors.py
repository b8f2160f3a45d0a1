"""Error types raised by the record stores and the planner session."""
from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Planner error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    DUPLICATE_ID = "DUPLICATE_ID"
    NOT_FOUND = "NOT_FOUND"
    EVENT_NOT_BOOKED = "EVENT_NOT_BOOKED"


@dataclass(frozen=True)
class FieldError:
    """One violated rule on one submitted field."""

    field: str
    message: str


class PlannerError(Exception):
    """Base planner error with code and user-safe message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(PlannerError):
    """Raised when a submission breaks one or more field rules."""

    def __init__(self, errors: list[FieldError], code: ErrorCode = ErrorCode.VALIDATION_FAILED) -> None:
        fields = ", ".join(sorted({e.field for e in errors}))
        super().__init__(code=code, message=f"Invalid fields: {fields}")
        self.errors = list(errors)

    def as_dict(self) -> dict[str, list[str]]:
        """Group messages by field, in the order they were reported."""
        grouped: dict[str, list[str]] = {}
        for err in self.errors:
            grouped.setdefault(err.field, []).append(err.message)
        return grouped


class DuplicateIdError(PlannerError):
    """Raised when a create reuses an id already present in the store."""

    def __init__(self, record_id: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_ID,
            message=f"A record with ID '{record_id}' already exists",
        )
        self.record_id = record_id


class NotFoundError(PlannerError):
    """Raised when an id does not match any record in the store."""

    def __init__(self, record_id: str) -> None:
        super().__init__(
            code=ErrorCode.NOT_FOUND,
            message=f"No record with ID '{record_id}'",
        )
        self.record_id = record_id


class UnknownEventError(ValidationError):
    """Raised when decor is added for an id with no booked event."""

    def __init__(self, record_id: str) -> None:
        super().__init__(
            [FieldError("id", "No booked event has this ID")],
            code=ErrorCode.EVENT_NOT_BOOKED,
        )
        self.record_id = record_id
