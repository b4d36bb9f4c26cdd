"""create_invites

Create the invites table: one row per invitation, holding the RSVP answer,
plus-ones, parking request and per-person door admissions.

Revision ID: 3c41d7a9e2f0
Revises:
Create Date: 2026-10-19 10:12:44.518230

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c41d7a9e2f0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE rsvp_status AS ENUM ('pending', 'accepted', 'declined');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.create_table(
        "invites",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("event_id", sa.String(length=255), nullable=False),
        sa.Column("guest_name", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=False),
        sa.Column(
            "allowed_plus_ones", sa.Integer(), server_default="0", nullable=False
        ),
        sa.Column(
            "rsvp_status",
            postgresql.ENUM(
                "pending",
                "accepted",
                "declined",
                name="rsvp_status",
                create_type=False,
            ),
            server_default="pending",
            nullable=False,
        ),
        sa.Column(
            "plus_ones",
            postgresql.JSONB(astext_type=sa.Text()),
            server_default="[]",
            nullable=False,
        ),
        sa.Column(
            "parking_required", sa.Boolean(), server_default="false", nullable=False
        ),
        sa.Column(
            "checked_in_principal",
            sa.Boolean(),
            server_default="false",
            nullable=False,
        ),
        sa.Column(
            "plus_one_admitted_at",
            postgresql.JSONB(astext_type=sa.Text()),
            server_default="[]",
            nullable=False,
        ),
        sa.Column(
            "check_in_log",
            postgresql.JSONB(astext_type=sa.Text()),
            server_default="[]",
            nullable=False,
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column("responded_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "allowed_plus_ones >= 0", name="ck_invites_allowed_plus_ones"
        ),
        sa.CheckConstraint(
            "jsonb_array_length(plus_ones) <= allowed_plus_ones",
            name="ck_invites_plus_ones_capacity",
        ),
    )

    op.create_index("idx_invites_event_id", "invites", ["event_id", "created_at"])
    op.create_index("idx_invites_event_status", "invites", ["event_id", "rsvp_status"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_invites_event_status", table_name="invites")
    op.drop_index("idx_invites_event_id", table_name="invites")
    op.drop_table("invites")
    op.execute("DROP TYPE IF EXISTS rsvp_status")
