"""Check-in use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from invitelink.application.usecase.base import BaseUseCase
from invitelink.config import CheckInSettings
from invitelink.domain.error import InvalidInputError
from invitelink.domain.service import CheckInCoordinator, CheckInResult, QRCodec
from invitelink.domain.value import AdmissionState, InviteId


class CheckInRequest(BaseModel):
    """Check-in request.

    Exactly one of ``invite_id`` (typed in or picked from the guest list) and
    ``scanned_code`` (raw QR payload) identifies the invite. Without
    ``plus_one_index`` the principal guest is admitted.
    """

    invite_id: str | None = None
    scanned_code: str | None = None
    plus_one_index: int | None = None
    scanned_at: datetime
    scanned_by: str
    allow_reentry: bool = False


class CheckInResponse(BaseModel):
    """Check-in response."""

    success: bool
    invite_id: str
    guest_name: str
    allowed_plus_ones: int
    checked_in_count: int
    checked_in_plus_ones: int
    admission_state: AdmissionState
    reentry: bool

    @classmethod
    def from_result(cls, result: CheckInResult) -> "CheckInResponse":
        """Build the response from coordinator counts."""
        return cls(
            success=True,
            invite_id=result.invite_id,
            guest_name=result.guest_name,
            allowed_plus_ones=result.allowed_plus_ones,
            checked_in_count=result.checked_in_count,
            checked_in_plus_ones=result.checked_in_plus_ones,
            admission_state=result.admission_state,
            reentry=result.reentry,
        )


class CheckInUseCase(BaseUseCase[CheckInRequest, CheckInResponse]):
    """Use case for admitting one person at the door."""

    def __init__(
        self,
        qr_codec: QRCodec,
        checkin_coordinator: CheckInCoordinator,
        checkin_settings: CheckInSettings,
    ) -> None:
        """Initialize use case.

        Args:
            qr_codec: QR payload codec
            checkin_coordinator: Check-in domain service
            checkin_settings: Door policy (re-entry authorization)
        """
        self.qr_codec = qr_codec
        self.checkin_coordinator = checkin_coordinator
        self.checkin_settings = checkin_settings

    async def execute(self, request: CheckInRequest) -> CheckInResponse:
        """Resolve the invite and admit the requested party.

        Raises:
            InvalidInputError: If the invite is not identified exactly once
            MalformedCodeError: If the scanned code is invalid
            NotFoundError, NotAcceptedError, AlreadyCheckedInError,
            InvalidPlusOneIndexError, CapacityExceededError: From the coordinator
        """
        invite_id = self._resolve_invite_id(request)

        allow_reentry = request.allow_reentry and self.checkin_settings.allow_reentry
        if request.allow_reentry and not allow_reentry:
            logfire.warn(
                "Re-entry requested but disabled by policy",
                invite_id=invite_id,
                scanned_by=request.scanned_by,
            )

        if request.plus_one_index is None:
            result = await self.checkin_coordinator.admit_principal(
                invite_id,
                scanned_at=request.scanned_at,
                scanned_by=request.scanned_by,
                allow_reentry=allow_reentry,
            )
        else:
            result = await self.checkin_coordinator.admit_plus_one(
                invite_id,
                request.plus_one_index,
                scanned_at=request.scanned_at,
                scanned_by=request.scanned_by,
                allow_reentry=allow_reentry,
            )

        return CheckInResponse.from_result(result)

    def _resolve_invite_id(self, request: CheckInRequest) -> InviteId:
        """Pick the invite from exactly one identifier, decoding scans first."""
        has_id = bool(request.invite_id)
        has_code = bool(request.scanned_code)
        if has_id == has_code:
            raise InvalidInputError(
                "Provide exactly one of invite_id or scanned_code"
            )
        if has_code:
            return self.qr_codec.decode(request.scanned_code)
        return InviteId(request.invite_id)
