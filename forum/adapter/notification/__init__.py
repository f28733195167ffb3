"""Notification channel adapter."""

from .channel import InAppMailNotificationChannel

__all__ = ["InAppMailNotificationChannel"]
