"""Unit tests for the Invite entity invariants."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from invitelink.domain.model import Invite
from invitelink.domain.value import (
    AdmissionState,
    CheckInEntry,
    EventId,
    Party,
    PlusOne,
    RsvpStatus,
    new_invite_id,
)


SCANNED_AT = datetime(2026, 6, 20, 19)


def make_invite(**overrides) -> Invite:
    data = {
        "id": new_invite_id(),
        "event_id": EventId("evt-1"),
        "guest_name": "Ada Lovelace",
        "phone": "+44 20 7946 0000",
        "allowed_plus_ones": 2,
    }
    data.update(overrides)
    return Invite(**data)


def accepted_with(count: int, **overrides) -> Invite:
    return make_invite(
        rsvp_status=RsvpStatus.ACCEPTED,
        plus_ones=[PlusOne(name=f"Guest {i}") for i in range(count)],
        plus_one_admitted_at=[None] * count,
        **overrides,
    )


class TestInviteInvariants:
    """Snapshots that break the invariants cannot be constructed."""

    def test_new_invite_is_pending_and_empty(self):
        """A fresh invite has no response and nobody admitted."""
        invite = make_invite()

        assert invite.rsvp_status == RsvpStatus.PENDING
        assert invite.plus_ones == []
        assert invite.guest_count == 0
        assert invite.checked_in_count == 0
        assert invite.admission_state == AdmissionState.NOT_ADMITTED

    def test_plus_ones_cannot_exceed_allowance(self):
        """More plus-ones than allowed is rejected."""
        with pytest.raises(ValidationError, match="exceeds allowed_plus_ones"):
            make_invite(
                allowed_plus_ones=1,
                rsvp_status=RsvpStatus.ACCEPTED,
                plus_ones=[PlusOne(name="A"), PlusOne(name="B")],
                plus_one_admitted_at=[None, None],
            )

    def test_admission_slots_parallel_to_plus_ones(self):
        """Every plus-one has exactly one admission slot."""
        with pytest.raises(ValidationError, match="parallel"):
            make_invite(
                rsvp_status=RsvpStatus.ACCEPTED,
                plus_ones=[PlusOne(name="A")],
                plus_one_admitted_at=[],
            )

    def test_declined_invite_cannot_carry_parking(self):
        """Parking is only meaningful on an accepted invite."""
        with pytest.raises(ValidationError, match="accepted RSVP"):
            make_invite(rsvp_status=RsvpStatus.DECLINED, parking_required=True)

    def test_pending_invite_cannot_be_checked_in(self):
        """Admission requires an accepted RSVP."""
        with pytest.raises(ValidationError, match="accepted RSVP"):
            make_invite(
                checked_in_principal=True,
                check_in_log=[
                    CheckInEntry(
                        party=Party.PRINCIPAL,
                        scanned_at=datetime(2026, 6, 20, 19),
                        scanned_by="door-1",
                    )
                ],
            )

    def test_log_must_match_admissions(self):
        """An admitted principal without a log entry is rejected."""
        with pytest.raises(ValidationError, match="check_in_log"):
            accepted_with(0, checked_in_principal=True)

    def test_log_entry_for_wrong_party_rejected(self):
        """A plus-one entry cannot stand in for the admitted principal."""
        entry = CheckInEntry(
            party=Party.PLUS_ONE, slot=0, scanned_at=SCANNED_AT, scanned_by="door-1"
        )

        with pytest.raises(ValidationError, match="does not match admitted"):
            accepted_with(1, checked_in_principal=True, check_in_log=[entry])

    def test_reentry_without_admission_rejected(self):
        """A re-entry alone does not account for an admission."""
        entry = CheckInEntry(
            party=Party.PRINCIPAL,
            scanned_at=SCANNED_AT,
            scanned_by="door-1",
            reentry=True,
        )

        with pytest.raises(ValidationError, match="re-entry before admission"):
            accepted_with(0, check_in_log=[entry])

    def test_reentry_for_unknown_slot_rejected(self):
        """Log entries must point at an existing plus-one."""
        entries = [
            CheckInEntry(party=Party.PRINCIPAL, scanned_at=SCANNED_AT, scanned_by="d"),
            CheckInEntry(
                party=Party.PLUS_ONE,
                slot=7,
                scanned_at=SCANNED_AT,
                scanned_by="d",
                reentry=True,
            ),
        ]

        with pytest.raises(ValidationError, match="unknown plus-one slot 7"):
            accepted_with(1, checked_in_principal=True, check_in_log=entries)

    def test_principal_entry_with_slot_rejected(self):
        entry = CheckInEntry(
            party=Party.PRINCIPAL, slot=0, scanned_at=SCANNED_AT, scanned_by="d"
        )

        with pytest.raises(ValidationError, match="cannot carry a slot"):
            accepted_with(0, checked_in_principal=True, check_in_log=[entry])

    def test_duplicate_admission_entries_rejected(self):
        """Only re-entries may repeat a party."""
        entry = CheckInEntry(
            party=Party.PRINCIPAL, scanned_at=SCANNED_AT, scanned_by="d"
        )

        with pytest.raises(ValidationError, match="same party twice"):
            accepted_with(0, checked_in_principal=True, check_in_log=[entry, entry])

    def test_empty_guest_name_rejected(self):
        """Guest name is required."""
        with pytest.raises(ValidationError):
            make_invite(guest_name="")

    @pytest.mark.parametrize(
        "field, value",
        [
            ("event_id", "e" * 256),
            ("guest_name", "A" * 256),
            ("phone", "5" * 51),
        ],
    )
    def test_overlong_text_rejected(self, field, value):
        """Text fields fit the storage columns."""
        with pytest.raises(ValidationError):
            make_invite(**{field: value})


class TestInviteDerivedState:
    """Counts and admission progress."""

    def test_guest_count_includes_principal(self):
        """An accepted invite counts the principal and every plus-one."""
        assert accepted_with(2).guest_count == 3

    def test_partially_then_fully_admitted(self):
        """Admission state follows the admitted head count."""
        scanned_at = datetime(2026, 6, 20, 19)
        principal_entry = CheckInEntry(
            party=Party.PRINCIPAL, scanned_at=scanned_at, scanned_by="door-1"
        )
        invite = accepted_with(1).evolve(
            checked_in_principal=True, check_in_log=[principal_entry]
        )
        assert invite.admission_state == AdmissionState.PARTIALLY_ADMITTED

        plus_one_entry = CheckInEntry(
            party=Party.PLUS_ONE, slot=0, scanned_at=scanned_at, scanned_by="door-1"
        )
        invite = invite.evolve(
            plus_one_admitted_at=[scanned_at],
            check_in_log=[principal_entry, plus_one_entry],
        )
        assert invite.checked_in_count == 2
        assert invite.admission_state == AdmissionState.FULLY_ADMITTED

    def test_reentry_entries_do_not_count(self):
        """Re-entries are logged without changing the head count."""
        scanned_at = datetime(2026, 6, 20, 19)
        entries = [
            CheckInEntry(party=Party.PRINCIPAL, scanned_at=scanned_at, scanned_by="d"),
            CheckInEntry(
                party=Party.PRINCIPAL,
                scanned_at=scanned_at,
                scanned_by="d",
                reentry=True,
            ),
        ]
        invite = accepted_with(0, checked_in_principal=True, check_in_log=entries)

        assert invite.checked_in_count == 1
        assert len(invite.check_in_log) == 2

    def test_evolve_revalidates(self):
        """evolve refuses to produce an invalid snapshot."""
        invite = make_invite()

        with pytest.raises(ValidationError):
            invite.evolve(allowed_plus_ones=-1)
