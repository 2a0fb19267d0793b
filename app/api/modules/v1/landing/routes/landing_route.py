from typing import Optional

from fastapi import APIRouter, Query, Request, status

from app.api.modules.v1.landing.schemas.landing_schema import LandingPage
from app.api.modules.v1.landing.service.landing_service import build_landing_page
from app.api.utils.device import is_mobile_client
from app.api.utils.response_payloads import success_response

router = APIRouter(prefix="/landing", tags=["Landing"])


@router.get("", response_model=LandingPage, status_code=status.HTTP_200_OK)
async def get_landing_page(
    request: Request,
    viewport_width: Optional[int] = Query(default=None, ge=0),
):
    """
    Landing page copy, tailored to mobile or desktop visitors.
    """
    is_mobile = is_mobile_client(request.headers.get("user-agent"), viewport_width)
    page = build_landing_page(is_mobile)
    return success_response(status.HTTP_200_OK, "Landing page", data=page.model_dump())
