import logging
from typing import Optional

from app.api.db.errors import SignupStoreError, is_unique_violation
from app.api.modules.v1.signups.models.signup_model import EmailSignup
from app.api.modules.v1.signups.schemas.signup_result import (
    NOT_CONFIGURED_ERROR,
    EmailLookupResult,
    SignupError,
    SignupErrorKind,
    SignupResult,
)
from app.api.modules.v1.signups.service.signup_repository import SignupRepository

logger = logging.getLogger("app")


def _backend_error(error: SignupStoreError) -> SignupError:
    return SignupError(
        kind=SignupErrorKind.BACKEND_ERROR,
        message=error.message,
        code=error.code,
    )


def _unknown_error(exc: Exception) -> SignupError:
    return SignupError(kind=SignupErrorKind.UNKNOWN_EXCEPTION, message=str(exc))


class SignupRecorder:
    """
    Records landing page signups and classifies the outcome.

    The recorder never raises: every failure comes back on the result. A
    recorder built without a repository is "unconfigured" and answers every
    call with ``NOT_CONFIGURED`` without touching the network.
    """

    def __init__(self, repository: Optional[SignupRepository] = None):
        self.repository = repository

    @property
    def configured(self) -> bool:
        return self.repository is not None

    async def record_signup(self, email: str) -> SignupResult:
        """
        Store an email that has already passed validation.

        Args:
            email: Validated email address, stored as given.

        Returns:
            SignupResult: new signup, existing signup, or failure with its error.
        """
        if self.repository is None:
            logger.warning(f"Signup store not configured. Email not stored: {email}")
            return SignupResult.failed(NOT_CONFIGURED_ERROR)

        try:
            await self.repository.insert(EmailSignup(email=email))
        except SignupStoreError as e:
            if is_unique_violation(e):
                logger.info(f"Email already signed up: {email}")
                return SignupResult.existing()
            logger.error(f"Error storing email {email}: {e!r}")
            return SignupResult.failed(_backend_error(e))
        except Exception as e:
            logger.error(f"Unexpected error storing email {email}: {e}", exc_info=True)
            return SignupResult.failed(_unknown_error(e))

        logger.info(f"New signup recorded: {email}")
        return SignupResult.new()

    async def email_exists(self, email: str) -> EmailLookupResult:
        """
        Look up whether an email has signed up before.

        Args:
            email: Validated email address.

        Returns:
            EmailLookupResult: ``exists`` is False whenever ``error`` is set.
        """
        if self.repository is None:
            return EmailLookupResult(exists=False, error=NOT_CONFIGURED_ERROR)

        try:
            exists = await self.repository.exists(email)
        except SignupStoreError as e:
            logger.error(f"Error checking email {email}: {e!r}")
            return EmailLookupResult(exists=False, error=_backend_error(e))
        except Exception as e:
            logger.error(f"Unexpected error checking email {email}: {e}", exc_info=True)
            return EmailLookupResult(exists=False, error=_unknown_error(e))

        return EmailLookupResult(exists=exists)
