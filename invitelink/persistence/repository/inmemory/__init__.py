"""In-memory repository implementations for testing."""

from .invite import InMemoryInviteRepository

__all__ = [
    "InMemoryInviteRepository",
]
