"""Check-in domain service.

Per invite, admission moves ``not_admitted -> partially_admitted ->
fully_admitted``, one person per scan. Duplicate detection is per person:
the principal has a flag and every plus-one has its own slot, so re-scanning
one plus-one is rejected while another plus-one on the same invite is
still admitted.
"""

from datetime import datetime

import logfire

from invitelink.domain.error import (
    AlreadyCheckedInError,
    CapacityExceededError,
    DomainError,
    InvalidInputError,
    InvalidPlusOneIndexError,
    NotAcceptedError,
)
from invitelink.domain.model.invite import Invite
from invitelink.domain.value import (
    AdmissionState,
    CheckInEntry,
    InviteId,
    Party,
    RsvpStatus,
)
from invitelink.domain.value.common import ValueObject

from .base import Service
from .invite_store import InviteStore


class CheckInResult(ValueObject):
    """Counts after an admission."""

    invite_id: InviteId
    guest_name: str
    allowed_plus_ones: int
    checked_in_count: int
    checked_in_plus_ones: int
    admission_state: AdmissionState
    reentry: bool = False

    @classmethod
    def from_invite(cls, invite: Invite, reentry: bool = False) -> "CheckInResult":
        """Summarize an invite snapshot."""
        return cls(
            invite_id=invite.id,
            guest_name=invite.guest_name,
            allowed_plus_ones=invite.allowed_plus_ones,
            checked_in_count=invite.checked_in_count,
            checked_in_plus_ones=invite.checked_in_plus_ones,
            admission_state=invite.admission_state,
            reentry=reentry,
        )


class CheckInCoordinator(Service):
    """Validates door scans and records admissions."""

    def __init__(self, invite_store: InviteStore) -> None:
        """Initialize check-in coordinator.

        Args:
            invite_store: Invite store
        """
        self.invite_store = invite_store

    async def admit_principal(
        self,
        invite_id: InviteId,
        scanned_at: datetime,
        scanned_by: str,
        allow_reentry: bool = False,
    ) -> CheckInResult:
        """Admit the invite's primary guest.

        Args:
            invite_id: Invite being scanned
            scanned_at: When the scan happened
            scanned_by: Staff member or device that scanned
            allow_reentry: Record a re-entry instead of rejecting a guest
                who already checked in

        Returns:
            Updated counts

        Raises:
            NotFoundError: If invite doesn't exist
            NotAcceptedError: If the guest did not accept
            AlreadyCheckedInError: If already admitted and re-entry not allowed
        """
        scanned_by = self._require_scanner(scanned_by)
        with logfire.span(
            "checkin_coordinator.admit_principal",
            invite_id=invite_id,
            scanned_by=scanned_by,
            allow_reentry=allow_reentry,
        ):
            reentry = False

            def apply(invite: Invite) -> Invite:
                nonlocal reentry
                self._require_accepted(invite)

                if invite.checked_in_principal:
                    if not allow_reentry:
                        raise AlreadyCheckedInError(invite.id, invite.guest_name)
                    reentry = True

                entry = CheckInEntry(
                    party=Party.PRINCIPAL,
                    scanned_at=scanned_at,
                    scanned_by=scanned_by,
                    reentry=reentry,
                )
                return invite.evolve(
                    checked_in_principal=True,
                    check_in_log=[*invite.check_in_log, entry],
                )

            invite = await self._apply(invite_id, apply)
            logfire.info(
                "Principal admitted",
                invite_id=invite_id,
                reentry=reentry,
                checked_in_count=invite.checked_in_count,
            )
            return CheckInResult.from_invite(invite, reentry=reentry)

    async def admit_plus_one(
        self,
        invite_id: InviteId,
        plus_one_index: int,
        scanned_at: datetime,
        scanned_by: str,
        allow_reentry: bool = False,
    ) -> CheckInResult:
        """Admit one plus-one slot of an invite.

        Args:
            invite_id: Invite being scanned
            plus_one_index: Slot of the plus-one in the accepted list
            scanned_at: When the scan happened
            scanned_by: Staff member or device that scanned
            allow_reentry: Record a re-entry instead of rejecting a slot
                that already checked in

        Returns:
            Updated counts

        Raises:
            NotFoundError: If invite doesn't exist
            NotAcceptedError: If the guest did not accept
            InvalidPlusOneIndexError: If the slot doesn't exist
            AlreadyCheckedInError: If the slot was already admitted
            CapacityExceededError: If every plus-one is already admitted
        """
        scanned_by = self._require_scanner(scanned_by)
        with logfire.span(
            "checkin_coordinator.admit_plus_one",
            invite_id=invite_id,
            plus_one_index=plus_one_index,
            scanned_by=scanned_by,
            allow_reentry=allow_reentry,
        ):
            reentry = False

            def apply(invite: Invite) -> Invite:
                nonlocal reentry
                self._require_accepted(invite)

                size = len(invite.plus_ones)
                if not 0 <= plus_one_index < size:
                    raise InvalidPlusOneIndexError(invite.id, plus_one_index, size)

                entry = CheckInEntry(
                    party=Party.PLUS_ONE,
                    slot=plus_one_index,
                    scanned_at=scanned_at,
                    scanned_by=scanned_by,
                )

                if invite.is_slot_admitted(plus_one_index):
                    if not allow_reentry:
                        raise AlreadyCheckedInError(
                            invite.id, invite.plus_ones[plus_one_index].name
                        )
                    reentry = True
                    return invite.evolve(
                        check_in_log=[
                            *invite.check_in_log,
                            entry.model_copy(update={"reentry": True}),
                        ],
                    )

                if invite.checked_in_plus_ones >= size:
                    raise CapacityExceededError(
                        invite.id, invite.checked_in_plus_ones + 1, size
                    )

                admitted_at = list(invite.plus_one_admitted_at)
                admitted_at[plus_one_index] = scanned_at
                return invite.evolve(
                    plus_one_admitted_at=admitted_at,
                    check_in_log=[*invite.check_in_log, entry],
                )

            invite = await self._apply(invite_id, apply)
            logfire.info(
                "Plus-one admitted",
                invite_id=invite_id,
                plus_one_index=plus_one_index,
                reentry=reentry,
                checked_in_count=invite.checked_in_count,
            )
            return CheckInResult.from_invite(invite, reentry=reentry)

    async def _apply(self, invite_id: InviteId, apply) -> Invite:
        try:
            return await self.invite_store.update(invite_id, apply)
        except DomainError as e:
            logfire.warn(
                "Check-in rejected",
                invite_id=invite_id,
                kind=e.kind.value,
                error=str(e),
            )
            raise

    @staticmethod
    def _require_accepted(invite: Invite) -> None:
        if invite.rsvp_status != RsvpStatus.ACCEPTED:
            raise NotAcceptedError(invite.id, invite.rsvp_status.value)

    @staticmethod
    def _require_scanner(scanned_by: str) -> str:
        scanned_by = (scanned_by or "").strip()
        if not scanned_by:
            raise InvalidInputError("Scanner identity (scanned_by) is required")
        return scanned_by
