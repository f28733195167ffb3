"""Content validation for threads and replies."""

import re
from typing import Optional

from forum.config import ForumSettings
from forum.domain.error import ContentValidationError, FieldError, ValidationErrorCode
from forum.domain.service.mention import contains_disguised_mention

from .base import Service

# Two letters after a dot read as a country code unless they name a common
# source file extension
_FILE_EXTENSIONS = "js|ts|py|rb|md|sh|cs|rs|go|kt|cc|hs|ex|db|gz|pl|so"

# scheme://host, www.host, host:port, or a bare host with a known top-level domain
URL_PATTERN = re.compile(
    rf"""
    [a-z][a-z0-9+.\-]*://[^\s/?#]+
    | \bwww\.[a-z0-9\-]+\.[a-z0-9.\-]+
    | \blocalhost:\d{{2,5}}\b
    | \b(?:[a-z0-9\-]+\.)+[a-z0-9\-]+:\d{{2,5}}\b
    | \b(?:[a-z0-9](?:[a-z0-9\-]*[a-z0-9])?\.)+
      (?:com|org|net|edu|gov|mil|int|io|dev|app|info|biz|xyz
        |(?!(?:{_FILE_EXTENSIONS})\b)[a-z]{{2}})\b
    """,
    re.IGNORECASE | re.VERBOSE,
)


class ContentValidator(Service):
    """Validates subjects and bodies before anything is persisted."""

    def __init__(self, forum_settings: ForumSettings) -> None:
        """Initialize content validator.

        Args:
            forum_settings: Forum business rules configuration
        """
        self.subject_max_length = forum_settings.subject_max_length

    def subject_error(self, subject: str) -> Optional[FieldError]:
        """Return the first rule the subject breaks, if any."""
        if not subject or not subject.strip():
            return FieldError(
                code=ValidationErrorCode.EMPTY,
                message="The subject field is required.",
            )
        if len(subject) > self.subject_max_length:
            return FieldError(
                code=ValidationErrorCode.TOO_LONG,
                message=(
                    f"The subject must not be greater than "
                    f"{self.subject_max_length} characters."
                ),
            )
        if URL_PATTERN.search(subject):
            return FieldError(
                code=ValidationErrorCode.CONTAINS_URL,
                message="The subject field cannot contain an url.",
            )
        return None

    def body_error(self, body: str) -> Optional[FieldError]:
        """Return the first rule the body breaks, if any."""
        if not body or not body.strip():
            return FieldError(
                code=ValidationErrorCode.EMPTY,
                message="The body field is required.",
            )
        if contains_disguised_mention(body):
            return FieldError(
                code=ValidationErrorCode.INVALID_MENTION,
                message="The body field contains an invalid mention.",
            )
        return None

    def validate_subject(self, subject: str) -> None:
        """Raise ContentValidationError if the subject is invalid."""
        self._raise_if_any({"subject": self.subject_error(subject)})

    def validate_body(self, body: str) -> None:
        """Raise ContentValidationError if the body is invalid."""
        self._raise_if_any({"body": self.body_error(body)})

    def validate_thread(self, subject: str, body: str) -> None:
        """Validate a thread submission, reporting every failing field."""
        self._raise_if_any(
            {"subject": self.subject_error(subject), "body": self.body_error(body)}
        )

    @staticmethod
    def _raise_if_any(errors: dict[str, Optional[FieldError]]) -> None:
        failing = {field: error for field, error in errors.items() if error is not None}
        if failing:
            raise ContentValidationError(failing)
