"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from invitelink.domain.model import Invite
from invitelink.domain.value import (
    CheckInEntry,
    EventId,
    InviteId,
    PlusOne,
    RsvpStatus,
)


def row_to_invite(row: Dict[str, Any]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: Database row as dict

    Returns:
        Invite domain model
    """
    return Invite(
        id=InviteId(row["id"]),
        event_id=EventId(row["event_id"]),
        guest_name=row["guest_name"],
        phone=row["phone"],
        allowed_plus_ones=row["allowed_plus_ones"],
        rsvp_status=RsvpStatus(row["rsvp_status"]),
        plus_ones=[PlusOne.model_validate(p) for p in row.get("plus_ones") or []],
        parking_required=row["parking_required"],
        checked_in_principal=row["checked_in_principal"],
        # JSONB stores ISO strings; pydantic parses them back to datetimes
        plus_one_admitted_at=row.get("plus_one_admitted_at") or [],
        check_in_log=[
            CheckInEntry.model_validate(e) for e in row.get("check_in_log") or []
        ],
        created_at=row["created_at"],
        responded_at=row.get("responded_at"),
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    """Convert Invite domain model to database dict.

    Args:
        invite: Invite domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = invite.model_dump()
    # JSONB columns need JSON-native values
    json_data = invite.model_dump(
        mode="json", include={"plus_ones", "plus_one_admitted_at", "check_in_log"}
    )
    data.update(json_data)
    data["rsvp_status"] = invite.rsvp_status.value
    return data
