"""Mail relay adapter."""

from .client import DisabledMailClient, HttpMailClient, MailClient

__all__ = [
    "DisabledMailClient",
    "HttpMailClient",
    "MailClient",
]
