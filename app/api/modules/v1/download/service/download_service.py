import logging
from pathlib import Path
from typing import Optional

from app.api.core.config import Settings, settings

logger = logging.getLogger("app")

DOWNLOAD_PATH = "/api/v1/download"


class DownloadService:
    """Locates the desktop installer served to desktop visitors."""

    def __init__(self, app_settings: Settings = settings):
        self.settings = app_settings

    @property
    def filename(self) -> str:
        return self.settings.DOWNLOAD_FILENAME

    @property
    def fallback_url(self) -> Optional[str]:
        return self.settings.DOWNLOAD_FALLBACK_URL or None

    def resolve(self) -> Optional[Path]:
        """
        Return the local installer path, or ``None`` if it is not on disk.
        """
        asset = self.settings.DOWNLOAD_ASSET_FILE
        if asset.is_file():
            return asset

        logger.warning(f"Download asset not found at {asset}")
        return None


def download_url() -> str:
    """Public path clients follow to start the download."""
    return DOWNLOAD_PATH


def get_download_service() -> DownloadService:
    return DownloadService(settings)
