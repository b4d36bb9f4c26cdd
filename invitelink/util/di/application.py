"""Application layer DI providers."""

from dishka import Scope, provide

from invitelink.application.engine import InviteLifecycleEngine
from invitelink.application.usecase.invite import (
    CheckInUseCase,
    CreateInviteUseCase,
    DecodeAndLookupUseCase,
    GetInviteDetailsUseCase,
    ListEventInvitesUseCase,
    SubmitRsvpUseCase,
)
from invitelink.config import CheckInSettings, Settings
from invitelink.domain.service import (
    CheckInCoordinator,
    InviteStore,
    QRCodec,
    RsvpProcessor,
)
from invitelink.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_create_invite_use_case(
        self, invite_store: InviteStore, qr_codec: QRCodec, settings: Settings
    ) -> CreateInviteUseCase:
        """Provide create invite use case."""
        return CreateInviteUseCase(
            invite_store=invite_store, qr_codec=qr_codec, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_get_invite_details_use_case(
        self, invite_store: InviteStore
    ) -> GetInviteDetailsUseCase:
        """Provide get invite details use case."""
        return GetInviteDetailsUseCase(invite_store=invite_store)

    @provide(scope=Scope.REQUEST)
    def get_submit_rsvp_use_case(
        self, rsvp_processor: RsvpProcessor
    ) -> SubmitRsvpUseCase:
        """Provide submit RSVP use case."""
        return SubmitRsvpUseCase(rsvp_processor=rsvp_processor)

    @provide(scope=Scope.REQUEST)
    def get_decode_and_lookup_use_case(
        self, qr_codec: QRCodec, invite_store: InviteStore
    ) -> DecodeAndLookupUseCase:
        """Provide decode-and-lookup use case."""
        return DecodeAndLookupUseCase(qr_codec=qr_codec, invite_store=invite_store)

    @provide(scope=Scope.REQUEST)
    def get_check_in_use_case(
        self,
        qr_codec: QRCodec,
        checkin_coordinator: CheckInCoordinator,
        checkin_settings: CheckInSettings,
    ) -> CheckInUseCase:
        """Provide check-in use case."""
        return CheckInUseCase(
            qr_codec=qr_codec,
            checkin_coordinator=checkin_coordinator,
            checkin_settings=checkin_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_event_invites_use_case(
        self, invite_store: InviteStore
    ) -> ListEventInvitesUseCase:
        """Provide list event invites use case."""
        return ListEventInvitesUseCase(invite_store=invite_store)

    @provide(scope=Scope.REQUEST)
    def get_invite_lifecycle_engine(
        self,
        create_invite: CreateInviteUseCase,
        get_invite_details: GetInviteDetailsUseCase,
        submit_rsvp: SubmitRsvpUseCase,
        decode_and_lookup: DecodeAndLookupUseCase,
        check_in: CheckInUseCase,
        list_event_invites: ListEventInvitesUseCase,
    ) -> InviteLifecycleEngine:
        """Provide the invite lifecycle engine."""
        return InviteLifecycleEngine(
            create_invite=create_invite,
            get_invite_details=get_invite_details,
            submit_rsvp=submit_rsvp,
            decode_and_lookup=decode_and_lookup,
            check_in=check_in,
            list_event_invites=list_event_invites,
        )
