"""Repository interfaces for InviteLink domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from invitelink.domain.repository.invite import InviteRepository

__all__ = [
    "InviteRepository",
]
