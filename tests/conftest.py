from typing import Callable, List, Optional

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.api.db.errors import UNIQUE_VIOLATION_CODE, SignupStoreError
from app.api.db.supabase_client import SupabaseClient
from app.api.modules.v1.signups.models.signup_model import EmailSignup
from app.api.modules.v1.signups.service.signup_factory import get_signup_recorder
from app.api.modules.v1.signups.service.signup_recorder import SignupRecorder

TEST_DATABASE_URL = "sqlite+aiosqlite://"
TEST_SUPABASE_URL = "https://test-project.supabase.co"
TEST_SUPABASE_KEY = "test-anon-key"


class InMemorySignupRepository:
    """Signup store double that behaves like a table with a unique email column."""

    def __init__(self, fail_with: Optional[Exception] = None):
        self.emails: List[str] = []
        self.insert_calls = 0
        self.fail_with = fail_with

    async def insert(self, record: EmailSignup) -> None:
        self.insert_calls += 1
        if self.fail_with is not None:
            raise self.fail_with
        if record.email in self.emails:
            raise SignupStoreError(
                message='duplicate key value violates unique constraint "email_signups_pkey"',
                code=UNIQUE_VIOLATION_CODE,
            )
        self.emails.append(record.email)

    async def exists(self, email: str) -> bool:
        if self.fail_with is not None:
            raise self.fail_with
        return email in self.emails


@pytest.fixture
def make_signup_repository():
    return InMemorySignupRepository


@pytest.fixture
def signup_repository():
    return InMemorySignupRepository()


@pytest.fixture
def signup_recorder(signup_repository):
    return SignupRecorder(signup_repository)


@pytest.fixture
def supabase_requests():
    """Requests captured by ``mock_supabase``."""
    return []


@pytest.fixture
def mock_supabase(supabase_requests) -> Callable[..., SupabaseClient]:
    """
    Build a ``SupabaseClient`` whose HTTP layer is an ``httpx.MockTransport``.

    The returned factory takes a handler ``(request) -> httpx.Response``; every
    request it sees is appended to ``supabase_requests``.
    """

    def factory(handler) -> SupabaseClient:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            supabase_requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        return SupabaseClient(TEST_SUPABASE_URL, TEST_SUPABASE_KEY, http_client=http_client)

    return factory


@pytest_asyncio.fixture
async def sqlite_session_maker():
    """In-memory SQLite database with the signup table created."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def client(signup_recorder):
    """Test client with the signup recorder swapped for the in-memory one."""
    from main import app

    app.dependency_overrides[get_signup_recorder] = lambda: signup_recorder

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
