import logging
from typing import Optional

import httpx

from app.api.core.config import Settings, settings
from app.api.db.database import AsyncSessionLocal
from app.api.db.supabase_client import SupabaseClient
from app.api.modules.v1.signups.service.signup_recorder import SignupRecorder
from app.api.modules.v1.signups.service.signup_repository import (
    SignupRepository,
    SqlSignupRepository,
    SupabaseSignupRepository,
)

logger = logging.getLogger("app")

SUPABASE_BACKEND = "supabase"
DATABASE_BACKEND = "database"


def build_signup_repository(
    app_settings: Settings,
    http_client: Optional[httpx.AsyncClient] = None,
) -> Optional[SignupRepository]:
    """
    Build the signup store selected by ``SIGNUP_BACKEND``.

    Args:
        app_settings: Settings to read the backend choice and credentials from.
        http_client: Optional ``httpx.AsyncClient`` for the Supabase client to use.

    Returns:
        Optional[SignupRepository]: ``None`` when Supabase credentials are
            missing or still the example values.

    Raises:
        ValueError: If ``SIGNUP_BACKEND`` names an unknown store.
    """
    backend = app_settings.SIGNUP_BACKEND.strip().lower()

    if backend == DATABASE_BACKEND:
        return SqlSignupRepository(AsyncSessionLocal)

    if backend != SUPABASE_BACKEND:
        raise ValueError(f"Unknown SIGNUP_BACKEND: {app_settings.SIGNUP_BACKEND!r}")

    if not app_settings.SUPABASE_CONFIGURED:
        logger.warning(
            "Supabase credentials not configured. Set SUPABASE_URL and SUPABASE_ANON_KEY "
            "to record signups."
        )
        return None

    client = SupabaseClient(
        app_settings.SUPABASE_URL,
        app_settings.SUPABASE_ANON_KEY,
        http_client=http_client,
        timeout=app_settings.SUPABASE_TIMEOUT_SECONDS,
    )
    return SupabaseSignupRepository(client, table=app_settings.SUPABASE_SIGNUP_TABLE)


_signup_recorder: Optional[SignupRecorder] = None


def get_signup_recorder() -> SignupRecorder:
    """FastAPI dependency returning the process-wide recorder, built on first use."""
    global _signup_recorder
    if _signup_recorder is None:
        _signup_recorder = SignupRecorder(build_signup_repository(settings))
    return _signup_recorder


async def close_signup_recorder() -> None:
    """Release the shared recorder's HTTP client and forget it."""
    global _signup_recorder
    if _signup_recorder is not None and isinstance(
        _signup_recorder.repository, SupabaseSignupRepository
    ):
        await _signup_recorder.repository.client.aclose()
    _signup_recorder = None
