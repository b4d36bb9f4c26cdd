"""Domain model entities for InviteLink."""

from invitelink.domain.model.invite import Invite

__all__ = [
    "Invite",
]
