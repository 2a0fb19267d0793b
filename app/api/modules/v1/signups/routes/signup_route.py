import logging

from fastapi import APIRouter, Depends, Query, Request, status

from app.api.modules.v1.download.service.download_service import download_url
from app.api.modules.v1.signups.routes.docs.signup_route_docs import (
    email_exists_responses,
    signup_responses,
)
from app.api.modules.v1.signups.schemas.signup_result import SignupError, SignupErrorKind
from app.api.modules.v1.signups.schemas.signup_schema import (
    INVALID_EMAIL_MESSAGE,
    EmailExistsResponse,
    SignupRequest,
    SignupResponse,
)
from app.api.modules.v1.signups.service.signup_factory import get_signup_recorder
from app.api.modules.v1.signups.service.signup_recorder import SignupRecorder
from app.api.utils.device import is_mobile_client
from app.api.utils.email_validator import is_valid_email
from app.api.utils.response_payloads import error_response, success_response

router = APIRouter(prefix="/signups", tags=["Signups"])
logger = logging.getLogger("app")

MOBILE_NEW_MESSAGE = "Thanks! We'll let you know when iOS drops."
MOBILE_EXISTING_MESSAGE = "You're already on the list. iOS coming soon!"
DESKTOP_NEW_MESSAGE = "Email saved! Starting download..."
DESKTOP_EXISTING_MESSAGE = "Welcome back! Starting download..."
FAILURE_MESSAGE = "Something went wrong. Please try again."

FAILURE_STATUS = {
    SignupErrorKind.NOT_CONFIGURED: status.HTTP_503_SERVICE_UNAVAILABLE,
    SignupErrorKind.BACKEND_ERROR: status.HTTP_502_BAD_GATEWAY,
    SignupErrorKind.UNKNOWN_EXCEPTION: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def signup_message(is_new: bool, is_mobile: bool) -> str:
    if is_mobile:
        return MOBILE_NEW_MESSAGE if is_new else MOBILE_EXISTING_MESSAGE
    return DESKTOP_NEW_MESSAGE if is_new else DESKTOP_EXISTING_MESSAGE


def _failure_response(error: SignupError):
    return error_response(
        status_code=FAILURE_STATUS.get(error.kind, status.HTTP_500_INTERNAL_SERVER_ERROR),
        message=FAILURE_MESSAGE,
        error=error.kind.value,
    )


@router.post(
    "",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
    responses=signup_responses,
)
async def create_signup(
    payload: SignupRequest,
    request: Request,
    recorder: SignupRecorder = Depends(get_signup_recorder),
):
    """
    Record an email from the landing page.

    Mobile visitors are only added to the list; desktop visitors also get the
    download URL for the installer.

    Returns:
    - 201: New signup
    - 200: Email was already on the list
    - 422: Invalid email address
    - 502: Signup store rejected the request
    - 503: Signup store not configured
    - 500: Unexpected failure
    """
    is_mobile = is_mobile_client(request.headers.get("user-agent"), payload.viewport_width)

    result = await recorder.record_signup(payload.email)
    if not result.success:
        logger.warning(
            f"Signup failed - Email: {payload.email}, Reason: {result.error.kind.value}"
        )
        return _failure_response(result.error)

    data = SignupResponse(
        email=payload.email,
        is_new=result.is_new,
        is_mobile=is_mobile,
        download_url=None if is_mobile else download_url(),
    )
    return success_response(
        status.HTTP_201_CREATED if result.is_new else status.HTTP_200_OK,
        signup_message(result.is_new, is_mobile),
        data=data.model_dump(),
    )


@router.get(
    "/exists",
    response_model=EmailExistsResponse,
    status_code=status.HTTP_200_OK,
    responses=email_exists_responses,
)
async def email_exists(
    email: str = Query(..., description="Email address to look up"),
    recorder: SignupRecorder = Depends(get_signup_recorder),
):
    """
    Check whether an email is already on the list.
    """
    if not is_valid_email(email):
        return error_response(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            message="Validation failed",
            error="VALIDATION_ERROR",
            errors={"email": [INVALID_EMAIL_MESSAGE]},
        )

    result = await recorder.email_exists(email)
    if result.error is not None:
        return _failure_response(result.error)

    return success_response(
        status.HTTP_200_OK,
        "Email is on the list" if result.exists else "Email is not on the list",
        data=EmailExistsResponse(email=email, exists=result.exists).model_dump(),
    )
