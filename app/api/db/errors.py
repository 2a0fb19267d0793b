from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION_CODE = "23505"
# PostgREST: a single-object request matched zero rows
NO_ROWS_CODE = "PGRST116"


class SignupStoreError(Exception):
    """
    Failure reported by a signup store, normalised across vendors.

    Attributes:
        message: Human-readable description from the store.
        code: SQLSTATE or PostgREST code when the store reports one.
        details: Extra context from the store, if any.
        status_code: HTTP status of the store response, for hosted stores.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.code = code
        self.details = details
        self.status_code = status_code
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"SignupStoreError(code={self.code!r}, status_code={self.status_code!r}, "
            f"message={self.message!r})"
        )


def store_error_from_sqlalchemy(exc: SQLAlchemyError) -> SignupStoreError:
    """
    Translate a SQLAlchemy failure into a ``SignupStoreError``.

    asyncpg reports the SQLSTATE on the driver exception; sqlite only reports a
    message, so its uniqueness failures are mapped onto the Postgres code.
    """
    orig = getattr(exc, "orig", None)
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code is None and isinstance(exc, IntegrityError) and "UNIQUE constraint failed" in str(orig):
        code = UNIQUE_VIOLATION_CODE

    return SignupStoreError(message=str(orig or exc), code=code)


def is_unique_violation(error: SignupStoreError) -> bool:
    """Return True when the store rejected an insert because the key already exists."""
    return error.code == UNIQUE_VIOLATION_CODE


def is_no_rows(error: SignupStoreError) -> bool:
    """Return True when a single-row lookup found nothing."""
    return error.code == NO_ROWS_CODE
