import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import FileResponse, RedirectResponse

from app.api.modules.v1.download.service.download_service import (
    DownloadService,
    get_download_service,
)
from app.api.utils.response_payloads import error_response

router = APIRouter(prefix="/download", tags=["Download"])
logger = logging.getLogger("app")


@router.get("", status_code=status.HTTP_200_OK)
async def download_app(service: DownloadService = Depends(get_download_service)):
    """
    Download the desktop installer.

    Returns:
    - 200: The installer as an attachment
    - 307: Redirect to the fallback URL when the installer is not on this server
    - 404: Neither the installer nor a fallback URL is available
    """
    asset = service.resolve()
    if asset is not None:
        logger.info(f"Download initiated for: {asset.name}")
        return FileResponse(
            asset,
            media_type="application/octet-stream",
            filename=service.filename,
        )

    if service.fallback_url:
        logger.info(f"Redirecting download to fallback: {service.fallback_url}")
        return RedirectResponse(
            service.fallback_url, status_code=status.HTTP_307_TEMPORARY_REDIRECT
        )

    return error_response(
        status_code=status.HTTP_404_NOT_FOUND,
        message="Download is not available right now.",
        error="DOWNLOAD_UNAVAILABLE",
    )
