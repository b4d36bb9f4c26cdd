"""Strongly typed identifiers for InviteLink domain entities.

Invite identifiers are opaque strings so they can travel inside QR payloads
and URLs unchanged. Events are owned by an external system; we only keep
their reference.
"""

import re
from typing import NewType
from uuid import uuid4

InviteId = NewType("InviteId", str)
EventId = NewType("EventId", str)

INVITE_ID_PREFIX = "INV-"
INVITE_ID_PATTERN = re.compile(r"^INV-[0-9A-F]{32}$")


def new_invite_id() -> InviteId:
    """Generate a fresh invite identifier (``INV-`` + 32 uppercase hex chars)."""
    return InviteId(f"{INVITE_ID_PREFIX}{uuid4().hex.upper()}")


def is_invite_id(value: str) -> bool:
    """Check whether a string has the shape of an invite identifier."""
    return bool(INVITE_ID_PATTERN.match(value))
