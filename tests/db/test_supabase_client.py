import json

import httpx
import pytest

from app.api.db.errors import NO_ROWS_CODE, UNIQUE_VIOLATION_CODE, SignupStoreError


@pytest.mark.asyncio
async def test_insert_posts_rows_with_auth_headers(mock_supabase, supabase_requests):
    client = mock_supabase(lambda request: httpx.Response(201))

    await client.insert("email_signups", [{"email": "a@b.com"}])

    assert len(supabase_requests) == 1
    request = supabase_requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://test-project.supabase.co/rest/v1/email_signups"
    assert request.headers["apikey"] == "test-anon-key"
    assert request.headers["authorization"] == "Bearer test-anon-key"
    assert request.headers["prefer"] == "return=minimal"
    assert json.loads(request.content) == [{"email": "a@b.com"}]


@pytest.mark.asyncio
async def test_insert_conflict_raises_store_error_with_code(mock_supabase):
    body = {
        "code": UNIQUE_VIOLATION_CODE,
        "details": "Key (email)=(a@b.com) already exists.",
        "hint": None,
        "message": 'duplicate key value violates unique constraint "email_signups_email_key"',
    }
    client = mock_supabase(lambda request: httpx.Response(409, json=body))

    with pytest.raises(SignupStoreError) as exc_info:
        await client.insert("email_signups", [{"email": "a@b.com"}])

    error = exc_info.value
    assert error.code == UNIQUE_VIOLATION_CODE
    assert error.status_code == 409
    assert error.details == "Key (email)=(a@b.com) already exists."
    assert "duplicate key" in error.message


@pytest.mark.asyncio
async def test_non_json_error_body_still_raises(mock_supabase):
    client = mock_supabase(lambda request: httpx.Response(502, text="Bad Gateway"))

    with pytest.raises(SignupStoreError) as exc_info:
        await client.insert("email_signups", [{"email": "a@b.com"}])

    assert exc_info.value.code is None
    assert exc_info.value.status_code == 502
    assert exc_info.value.message == "Bad Gateway"


@pytest.mark.asyncio
async def test_transport_error_raises_store_error(mock_supabase):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = mock_supabase(handler)

    with pytest.raises(SignupStoreError) as exc_info:
        await client.insert("email_signups", [{"email": "a@b.com"}])

    assert exc_info.value.code is None
    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_select_single_sends_eq_filter(mock_supabase, supabase_requests):
    client = mock_supabase(lambda request: httpx.Response(200, json={"email": "a+b@c.com"}))

    row = await client.select_single("email_signups", "email", email="a+b@c.com")

    assert row == {"email": "a+b@c.com"}
    request = supabase_requests[0]
    assert request.method == "GET"
    assert request.url.params["select"] == "email"
    assert request.url.params["email"] == "eq.a+b@c.com"
    assert request.headers["accept"] == "application/vnd.pgrst.object+json"


@pytest.mark.asyncio
async def test_select_single_no_rows(mock_supabase):
    body = {
        "code": NO_ROWS_CODE,
        "details": "The result contains 0 rows",
        "hint": None,
        "message": "JSON object requested, multiple (or no) rows returned",
    }
    client = mock_supabase(lambda request: httpx.Response(406, json=body))

    with pytest.raises(SignupStoreError) as exc_info:
        await client.select_single("email_signups", "email", email="a@b.com")

    assert exc_info.value.code == NO_ROWS_CODE
