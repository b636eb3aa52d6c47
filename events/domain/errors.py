"""Domain error codes for the ticketing backend."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    ORGANIZER_NOT_FOUND = "ORGANIZER_NOT_FOUND"
    NOT_EVENT_ORGANIZER = "NOT_EVENT_ORGANIZER"
    FORBIDDEN = "FORBIDDEN"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_CATEGORY_ID = "INVALID_CATEGORY_ID"
    INVALID_PAGINATION = "INVALID_PAGINATION"
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_SIGNATURE = "INVALID_SIGNATURE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    """A referenced entity does not exist."""


class AuthorizationError(DomainError):
    """The acting user has no rights over the target."""


class ValidationError(DomainError):
    """Malformed or missing input."""


class VerificationError(DomainError):
    """A webhook payload failed signature verification."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SIGNATURE,
            message="Webhook signature verification failed",
        )
        self.reason = reason


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class CategoryNotFoundError(NotFoundError):
    """Raised when a category reference does not resolve."""

    def __init__(self, category_id: str) -> None:
        super().__init__(
            code=ErrorCode.CATEGORY_NOT_FOUND,
            message="Category not found",
        )
        self.category_id = category_id


class OrganizerNotFoundError(NotFoundError):
    """Raised when the organizing user does not exist."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.ORGANIZER_NOT_FOUND,
            message="Organizer not found",
        )
        self.user_id = user_id


class NotEventOrganizerError(AuthorizationError):
    """Raised when someone other than the organizer mutates an event."""

    def __init__(self, event_id: str, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.NOT_EVENT_ORGANIZER,
            message="Only the event organizer may perform this action",
        )
        self.event_id = event_id
        self.user_id = user_id


class ForbiddenError(AuthorizationError):
    """Raised when a user reads data that belongs to someone else."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.FORBIDDEN,
            message="You do not have access to this resource",
        )


class InvalidEventIdError(ValidationError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidCategoryIdError(ValidationError):
    """Raised when a category ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CATEGORY_ID,
            message="Invalid category ID format",
        )


class InvalidPaginationError(ValidationError):
    """Raised for a page below 1 or a non-positive page size."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PAGINATION,
            message=detail,
        )


class InvalidInputError(ValidationError):
    """Raised when a required field is missing or malformed."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_INPUT,
            message=detail,
        )
