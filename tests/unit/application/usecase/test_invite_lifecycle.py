"""Unit tests for the invite lifecycle engine and its use cases."""

import pytest

from invitelink.application.engine import InviteLifecycleEngine
from invitelink.application.usecase.invite import (
    CheckInRequest,
    CheckInUseCase,
    CreateInviteRequest,
    ListEventInvitesRequest,
    PlusOneInfo,
    SubmitRsvpRequest,
)
from invitelink.application.usecase.invite.submit_rsvp import (
    ACCEPTED_MESSAGE,
    DECLINED_MESSAGE,
)
from invitelink.config import CheckInSettings
from invitelink.domain.error import (
    AlreadyCheckedInError,
    InvalidInputError,
    MalformedCodeError,
    NotFoundError,
)
from invitelink.domain.service import CheckInCoordinator, QRCodec
from invitelink.domain.value import AdmissionState, RsvpStatus
from tests.factories import EVENT_ID, at
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def create(engine: InviteLifecycleEngine, allowed_plus_ones: int = 2):
    return await engine.create_invite(
        CreateInviteRequest(
            event_id=EVENT_ID,
            guest_name="Ada Lovelace",
            phone="+1 555 0100",
            allowed_plus_ones=allowed_plus_ones,
        )
    )


async def accept(engine: InviteLifecycleEngine, invite_id: str, *names: str):
    return await engine.submit_rsvp(
        SubmitRsvpRequest(
            invite_id=invite_id,
            attending=True,
            plus_ones=[PlusOneInfo(name=name) for name in names],
            parking_required=True,
        )
    )


class TestCreateInvite:
    """Tests for create_invite."""

    @pytest.mark.asyncio
    async def test_links_point_at_invite(self, unit_env):
        """QR and RSVP links embed the new invite ID."""
        engine = await unit_env.get(InviteLifecycleEngine)

        response = await create(engine)

        assert response.qr_code_url.endswith(f"/invites/{response.invite_id}/qr")
        assert response.rsvp_url.endswith(f"/rsvp/{response.invite_id}")
        assert response.qr_payload.startswith(f"IL1.{response.invite_id}.")

    @pytest.mark.asyncio
    async def test_payload_decodes_to_invite(self, unit_env):
        """The returned payload is accepted by the codec."""
        engine = await unit_env.get(InviteLifecycleEngine)
        qr_codec = await unit_env.get(QRCodec)

        response = await create(engine)

        assert qr_codec.decode(response.qr_payload) == response.invite_id


class TestDetailsAndRsvp:
    """Tests for get_invite_details and submit_rsvp."""

    @pytest.mark.asyncio
    async def test_pending_details(self, unit_env):
        """A new invite is pending with nobody checked in."""
        engine = await unit_env.get(InviteLifecycleEngine)
        created = await create(engine)

        details = await engine.get_invite_details(created.invite_id)

        assert details.rsvp_status == RsvpStatus.PENDING
        assert details.checked_in is False
        assert details.plus_ones == []
        assert details.allowed_plus_ones == 2
        assert details.admission_state == AdmissionState.NOT_ADMITTED

    @pytest.mark.asyncio
    async def test_accept_message_and_details(self, unit_env):
        """Accepting returns the thank-you message and stores plus-ones."""
        engine = await unit_env.get(InviteLifecycleEngine)
        created = await create(engine)

        response = await accept(engine, created.invite_id, "Charles")
        details = await engine.get_invite_details(created.invite_id)

        assert response.success is True
        assert response.message == ACCEPTED_MESSAGE
        assert response.guest_count == 2
        assert details.parking_required is True
        assert [p.name for p in details.plus_ones] == ["Charles"]

    @pytest.mark.asyncio
    async def test_decline_message(self, unit_env):
        """Declining returns the regret message."""
        engine = await unit_env.get(InviteLifecycleEngine)
        created = await create(engine)

        response = await engine.submit_rsvp(
            SubmitRsvpRequest(invite_id=created.invite_id, attending=False)
        )

        assert response.message == DECLINED_MESSAGE
        assert response.rsvp_status == RsvpStatus.DECLINED
        assert response.guest_count == 0

    @pytest.mark.asyncio
    async def test_unknown_invite_details(self, unit_env):
        """Unknown IDs are NotFound."""
        engine = await unit_env.get(InviteLifecycleEngine)

        with pytest.raises(NotFoundError):
            await engine.get_invite_details("INV-" + "1" * 32)


class TestDecodeAndLookup:
    """Tests for decode_and_lookup."""

    @pytest.mark.asyncio
    async def test_scan_resolves_invite(self, unit_env):
        """A valid payload resolves to the invite details."""
        engine = await unit_env.get(InviteLifecycleEngine)
        created = await create(engine)

        details = await engine.decode_and_lookup(created.qr_payload)

        assert details.invite_id == created.invite_id
        assert details.guest_name == "Ada Lovelace"

    @pytest.mark.asyncio
    async def test_malformed_before_not_found(self, unit_env):
        """Garbage fails decoding before any lookup."""
        engine = await unit_env.get(InviteLifecycleEngine)

        with pytest.raises(MalformedCodeError):
            await engine.decode_and_lookup("INV-" + "1" * 32)

    @pytest.mark.asyncio
    async def test_valid_code_for_missing_invite(self, unit_env):
        """A well-signed code for an unknown invite is NotFound."""
        engine = await unit_env.get(InviteLifecycleEngine)
        qr_codec = await unit_env.get(QRCodec)

        with pytest.raises(NotFoundError):
            await engine.decode_and_lookup(qr_codec.encode("INV-" + "2" * 32))


class TestCheckIn:
    """Tests for check_in."""

    @pytest.mark.asyncio
    async def test_scan_then_plus_one_by_id(self, unit_env):
        """Principal by scan, plus-one by ID, both counted."""
        engine = await unit_env.get(InviteLifecycleEngine)
        created = await create(engine)
        await accept(engine, created.invite_id, "Charles")

        principal = await engine.check_in(
            CheckInRequest(
                scanned_code=created.qr_payload, scanned_at=at(19), scanned_by="door-1"
            )
        )
        plus_one = await engine.check_in(
            CheckInRequest(
                invite_id=created.invite_id,
                plus_one_index=0,
                scanned_at=at(19, 1),
                scanned_by="door-1",
            )
        )

        assert principal.success is True
        assert principal.checked_in_count == 1
        assert plus_one.checked_in_count == 2
        assert plus_one.admission_state == AdmissionState.FULLY_ADMITTED
        details = await engine.get_invite_details(created.invite_id)
        assert details.checked_in is True
        assert details.plus_ones[0].checked_in is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("with_id,with_code", [(True, True), (False, False)])
    async def test_exactly_one_identifier(self, unit_env, with_id, with_code):
        """Invite must be identified by ID or by scan, not both or neither."""
        engine = await unit_env.get(InviteLifecycleEngine)
        created = await create(engine)

        with pytest.raises(InvalidInputError):
            await engine.check_in(
                CheckInRequest(
                    invite_id=created.invite_id if with_id else None,
                    scanned_code=created.qr_payload if with_code else None,
                    scanned_at=at(19),
                    scanned_by="door-1",
                )
            )

    @pytest.mark.asyncio
    async def test_reentry_ignored_when_policy_disabled(self, unit_env):
        """Without operator authorization a re-scan is rejected."""
        engine = await unit_env.get(InviteLifecycleEngine)
        created = await create(engine)
        await accept(engine, created.invite_id)
        request = CheckInRequest(
            invite_id=created.invite_id,
            scanned_at=at(19),
            scanned_by="door-1",
            allow_reentry=True,
        )
        await engine.check_in(request)

        with pytest.raises(AlreadyCheckedInError):
            await engine.check_in(request)

    @pytest.mark.asyncio
    async def test_reentry_when_policy_enabled(self, unit_env):
        """With re-entry enabled, a flagged re-scan is recorded."""
        engine = await unit_env.get(InviteLifecycleEngine)
        use_case = CheckInUseCase(
            qr_codec=await unit_env.get(QRCodec),
            checkin_coordinator=await unit_env.get(CheckInCoordinator),
            checkin_settings=CheckInSettings(allow_reentry=True),
        )
        created = await create(engine)
        await accept(engine, created.invite_id)
        await use_case.execute(
            CheckInRequest(
                invite_id=created.invite_id, scanned_at=at(19), scanned_by="door-1"
            )
        )

        response = await use_case.execute(
            CheckInRequest(
                invite_id=created.invite_id,
                scanned_at=at(22),
                scanned_by="door-1",
                allow_reentry=True,
            )
        )

        assert response.reentry is True
        assert response.checked_in_count == 1


class TestListEventInvites:
    """Tests for list_event_invites."""

    @pytest.mark.asyncio
    async def test_guest_list_with_status_filter(self, unit_env):
        """Only accepted invites are listed when filtering on accepted."""
        engine = await unit_env.get(InviteLifecycleEngine)
        accepted = await create(engine)
        await create(engine)
        await accept(engine, accepted.invite_id)

        response = await engine.list_event_invites(
            ListEventInvitesRequest(event_id=EVENT_ID, status=RsvpStatus.ACCEPTED)
        )

        assert response.total == 1
        assert [i.invite_id for i in response.invites] == [accepted.invite_id]

    @pytest.mark.asyncio
    async def test_unknown_event_is_empty(self, unit_env):
        """An event without invites lists nothing."""
        engine = await unit_env.get(InviteLifecycleEngine)

        response = await engine.list_event_invites(
            ListEventInvitesRequest(event_id="evt-nobody")
        )

        assert response.total == 0
        assert response.invites == []
