"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class MailDeliveryError(AdapterError):
    """Raised when the mail relay rejects or cannot receive a message."""

    pass
