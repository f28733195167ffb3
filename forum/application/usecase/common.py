"""Shared result shape and user-facing messages for use cases."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.error import ContentValidationError, NotFoundError

THREAD_CREATED = "Thread successfully created!"
THREAD_UPDATED = "Thread successfully updated!"
THREAD_DELETED = "Thread successfully deleted!"
REPLY_CREATED = "Reply successfully created!"
REPLY_UPDATED = "Reply successfully updated!"
SOLUTION_MARKED = "Solution successfully marked!"
SOLUTION_UNMARKED = "Solution successfully unmarked!"
VALIDATION_FAILED = "Something went wrong. Please review the fields below."
FORBIDDEN = "You are not allowed to perform this action."

FORUM_URL = "/forum"


def thread_url(slug: str) -> str:
    """Location of a thread page."""
    return f"{FORUM_URL}/{slug}"


def parse_id(value: str, resource: str) -> UUID:
    """Parse a client-supplied identifier.

    A malformed id cannot name anything stored, so it is reported as missing.

    Raises:
        NotFoundError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except ValueError as e:
        raise NotFoundError(resource, value) from e


def field_error_messages(error: ContentValidationError) -> dict[str, str]:
    """Flatten field errors to ``{field: message}`` for display."""
    return {field: e.message for field, e in error.field_errors.items()}


class ActionResponse(BaseModel):
    """Outcome of a write action.

    Validation and authorization failures are reported here instead of
    raised, so callers can render them next to the form.
    """

    success: bool
    forbidden: bool = False
    message: str
    redirect_target: str | None = None
    field_errors: dict[str, str] = {}

    @classmethod
    def denied(cls):
        """Response for an actor that may not perform the action."""
        return cls(success=False, forbidden=True, message=FORBIDDEN)

    @classmethod
    def invalid(cls, error: ContentValidationError):
        """Response for content that failed validation."""
        return cls(
            success=False,
            message=VALIDATION_FAILED,
            field_errors=field_error_messages(error),
        )
