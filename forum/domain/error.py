"""Domain layer errors."""

from enum import Enum

from pydantic import BaseModel


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationErrorCode(str, Enum):
    """Reason a content field was rejected."""

    EMPTY = "empty"
    TOO_LONG = "too_long"
    CONTAINS_URL = "contains_url"
    INVALID_MENTION = "invalid_mention"


class FieldError(BaseModel):
    """A single field-level validation failure."""

    code: ValidationErrorCode
    message: str


class ContentValidationError(DomainError):
    """Raised when submitted content fails validation.

    Carries every failing field at once so callers can report them together.
    """

    def __init__(self, field_errors: dict[str, FieldError]):
        self.field_errors = field_errors
        super().__init__(
            "; ".join(f"{field}: {error.message}" for field, error in field_errors.items())
        )

    def codes(self) -> dict[str, ValidationErrorCode]:
        """Map each failing field to its error code."""
        return {field: error.code for field, error in self.field_errors.items()}


class RateLimitExceededError(DomainError):
    """Raised when an author has reached the thread creation limit."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"You can only post a maximum of {limit} threads per day.")


class ForbiddenError(DomainError):
    """Raised when a user acts on content they neither own nor moderate."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str | None):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not allowed to {action} {resource} {resource_id}"
        )


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
