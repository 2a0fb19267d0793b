import pytest

from app.api.db.errors import SignupStoreError
from app.api.modules.v1.signups.routes.signup_route import (
    DESKTOP_EXISTING_MESSAGE,
    DESKTOP_NEW_MESSAGE,
    FAILURE_MESSAGE,
    MOBILE_EXISTING_MESSAGE,
    MOBILE_NEW_MESSAGE,
)
from app.api.modules.v1.signups.service.signup_factory import get_signup_recorder
from app.api.modules.v1.signups.service.signup_recorder import SignupRecorder
from main import app

SIGNUP_URL = "/api/v1/signups"
EXISTS_URL = "/api/v1/signups/exists"
MAC_UA = "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_0) AppleWebKit/605.1.15 Safari/605.1.15"
IPHONE_UA = "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) Mobile/15E148"


@pytest.fixture
def use_recorder():
    """Swap in a specific recorder for the duration of one test."""

    def _use(recorder: SignupRecorder):
        app.dependency_overrides[get_signup_recorder] = lambda: recorder

    return _use


def test_desktop_signup_new_then_existing(client, signup_repository):
    headers = {"User-Agent": MAC_UA}

    first = client.post(SIGNUP_URL, json={"email": "user@example.com"}, headers=headers)
    second = client.post(SIGNUP_URL, json={"email": "user@example.com"}, headers=headers)

    assert first.status_code == 201
    body = first.json()
    assert body["status"] == "SUCCESS"
    assert body["message"] == DESKTOP_NEW_MESSAGE
    assert body["data"] == {
        "email": "user@example.com",
        "is_new": True,
        "is_mobile": False,
        "download_url": "/api/v1/download",
    }

    assert second.status_code == 200
    assert second.json()["message"] == DESKTOP_EXISTING_MESSAGE
    assert second.json()["data"]["is_new"] is False
    assert signup_repository.emails == ["user@example.com"]


def test_mobile_signup_has_no_download(client):
    headers = {"User-Agent": IPHONE_UA}

    first = client.post(SIGNUP_URL, json={"email": "user@example.com"}, headers=headers)
    second = client.post(SIGNUP_URL, json={"email": "user@example.com"}, headers=headers)

    assert first.status_code == 201
    assert first.json()["message"] == MOBILE_NEW_MESSAGE
    assert first.json()["data"]["is_mobile"] is True
    assert first.json()["data"]["download_url"] is None

    assert second.status_code == 200
    assert second.json()["message"] == MOBILE_EXISTING_MESSAGE


def test_narrow_viewport_counts_as_mobile(client):
    response = client.post(
        SIGNUP_URL,
        json={"email": "user@example.com", "viewport_width": 500},
        headers={"User-Agent": MAC_UA},
    )

    assert response.status_code == 201
    assert response.json()["data"]["is_mobile"] is True


@pytest.mark.parametrize("email", ["a..b@b.com", "a@-b.com", "a@b", "a@b.com ", ""])
def test_invalid_email_is_rejected_before_recording(client, signup_repository, email):
    response = client.post(SIGNUP_URL, json={"email": email})

    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["errors"]["email"] == ["Please enter a valid email address"]
    assert signup_repository.insert_calls == 0


def test_missing_email_is_rejected(client):
    response = client.post(SIGNUP_URL, json={})

    assert response.status_code == 422
    assert "email" in response.json()["errors"]


def test_unconfigured_store_returns_503(client, use_recorder):
    use_recorder(SignupRecorder(None))

    response = client.post(SIGNUP_URL, json={"email": "user@example.com"})

    assert response.status_code == 503
    assert response.json()["error"] == "NOT_CONFIGURED"
    assert response.json()["message"] == FAILURE_MESSAGE


def test_store_error_returns_502(client, use_recorder, make_signup_repository):
    use_recorder(SignupRecorder(make_signup_repository(fail_with=SignupStoreError("down"))))

    response = client.post(SIGNUP_URL, json={"email": "user@example.com"})

    assert response.status_code == 502
    assert response.json()["error"] == "BACKEND_ERROR"


def test_unexpected_error_returns_500(client, use_recorder, make_signup_repository):
    use_recorder(SignupRecorder(make_signup_repository(fail_with=RuntimeError("boom"))))

    response = client.post(SIGNUP_URL, json={"email": "user@example.com"})

    assert response.status_code == 500
    assert response.json()["error"] == "UNKNOWN_EXCEPTION"


def test_email_exists_lookup(client):
    missing = client.get(EXISTS_URL, params={"email": "user@example.com"})
    assert missing.status_code == 200
    assert missing.json()["data"] == {"email": "user@example.com", "exists": False}

    client.post(SIGNUP_URL, json={"email": "user@example.com"})

    found = client.get(EXISTS_URL, params={"email": "user@example.com"})
    assert found.json()["data"] == {"email": "user@example.com", "exists": True}


def test_email_exists_rejects_invalid_email(client):
    response = client.get(EXISTS_URL, params={"email": "not-an-email"})

    assert response.status_code == 422
    assert response.json()["errors"]["email"] == ["Please enter a valid email address"]


def test_email_exists_unconfigured(client, use_recorder):
    use_recorder(SignupRecorder(None))

    response = client.get(EXISTS_URL, params={"email": "user@example.com"})

    assert response.status_code == 503
