"""Door scan routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from invitelink.application.engine import InviteLifecycleEngine
from invitelink.application.usecase.invite import CheckInRequest
from invitelink.interface.api.schema import CheckInAPIFields, CheckInAPIResponse

router = APIRouter(prefix="/checkin", tags=["checkin"], route_class=DishkaRoute)


class ScanAPIRequest(CheckInAPIFields):
    """Scan of a guest's QR code."""

    code: str


@router.post("/scan", response_model=CheckInAPIResponse)
async def scan(
    request: ScanAPIRequest,
    engine: FromDishka[InviteLifecycleEngine],
) -> CheckInAPIResponse:
    """Decode a scanned QR payload and admit the requested party.

    Raises:
        MalformedCodeError: If the code is corrupted or forged (400)
        AlreadyCheckedInError: If that person is already inside (409)
    """
    response = await engine.check_in(
        CheckInRequest(
            scanned_code=request.code,
            plus_one_index=request.plus_one_index,
            scanned_at=request.scanned_at,
            scanned_by=request.scanned_by,
            allow_reentry=request.allow_reentry,
        )
    )
    return CheckInAPIResponse.from_response(response)
