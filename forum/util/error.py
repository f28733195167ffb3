"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class TokenError(UtilError):
    """Raised when an auth token cannot be verified."""

    pass
