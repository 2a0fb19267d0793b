import logging
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import select

from app.api.db.errors import SignupStoreError, is_no_rows, store_error_from_sqlalchemy
from app.api.db.supabase_client import SupabaseClient
from app.api.modules.v1.signups.models.signup_model import EmailSignup

logger = logging.getLogger("app")


class SignupRepository(Protocol):
    """Storage for signup records. Failures are raised as ``SignupStoreError``."""

    async def insert(self, record: EmailSignup) -> None:
        ...

    async def exists(self, email: str) -> bool:
        ...


class SupabaseSignupRepository:
    """Signup records kept in a Supabase table."""

    def __init__(self, client: SupabaseClient, table: str = "email_signups"):
        self.client = client
        self.table = table

    async def insert(self, record: EmailSignup) -> None:
        """
        Insert one signup row.

        Args:
            record: Row to insert; ``created_at`` is sent as an ISO 8601 string.

        Raises:
            SignupStoreError: If the table rejects the row (including duplicates).
        """
        await self.client.insert(self.table, [record.model_dump(mode="json")])

    async def exists(self, email: str) -> bool:
        try:
            await self.client.select_single(self.table, "email", email=email)
        except SignupStoreError as e:
            if is_no_rows(e):
                return False
            raise
        return True


class SqlSignupRepository:
    """Signup records kept in the application's own SQL database."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self.session_maker = session_maker

    async def insert(self, record: EmailSignup) -> None:
        """
        Insert one signup row in its own transaction.

        Args:
            record: Row to insert.

        Raises:
            SignupStoreError: If the database rejects the row (including duplicates).
        """
        async with self.session_maker() as session:
            try:
                session.add(record)
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                raise store_error_from_sqlalchemy(e) from e

    async def exists(self, email: str) -> bool:
        async with self.session_maker() as session:
            try:
                result = await session.execute(select(EmailSignup).where(EmailSignup.email == email))
            except SQLAlchemyError as e:
                raise store_error_from_sqlalchemy(e) from e
            return result.scalar_one_or_none() is not None
