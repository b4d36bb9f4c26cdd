"""SQLAlchemy table definitions for InviteLink.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    Index,
    Integer,
    MetaData,
    String,
    Table,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP

from invitelink.domain.model.invite import (
    EVENT_ID_MAX_LENGTH,
    GUEST_NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# INVITES TABLE
# ============================================================================
invites_table = Table(
    "invites",
    metadata,
    Column("id", String(64), primary_key=True),  # Opaque INV-... identifier
    # External event reference
    Column("event_id", String(EVENT_ID_MAX_LENGTH), nullable=False),
    Column("guest_name", String(GUEST_NAME_MAX_LENGTH), nullable=False),
    Column("phone", String(PHONE_MAX_LENGTH), nullable=False),
    Column("allowed_plus_ones", Integer, nullable=False, server_default="0"),
    Column(
        "rsvp_status",
        Enum("pending", "accepted", "declined", name="rsvp_status", create_type=False),
        nullable=False,
        server_default="pending",
    ),
    # [{"name": ..., "phone": ...}], only populated when accepted
    Column("plus_ones", JSONB, nullable=False, server_default="[]"),
    Column("parking_required", Boolean, nullable=False, server_default="false"),
    Column("checked_in_principal", Boolean, nullable=False, server_default="false"),
    # Per-slot admission timestamps, parallel to plus_ones (null = not admitted)
    Column("plus_one_admitted_at", JSONB, nullable=False, server_default="[]"),
    # Append-only admission events
    Column("check_in_log", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("responded_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("allowed_plus_ones >= 0", name="ck_invites_allowed_plus_ones"),
    CheckConstraint(
        "jsonb_array_length(plus_ones) <= allowed_plus_ones",
        name="ck_invites_plus_ones_capacity",
    ),
)

# Door-side guest list per event
Index("idx_invites_event_id", invites_table.c.event_id, invites_table.c.created_at)
Index("idx_invites_event_status", invites_table.c.event_id, invites_table.c.rsvp_status)
