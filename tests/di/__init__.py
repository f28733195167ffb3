"""Mock providers for testing."""

from .mail import MockMailProvider, RecordingMailClient
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockMailProvider",
    "MockPersistenceProvider",
    "RecordingMailClient",
    "build_test_container",
]
