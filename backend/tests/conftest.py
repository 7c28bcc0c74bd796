import os
import pytest
import resend
from fastapi.testclient import TestClient
from main import app
from utils_others.config import NotificationSettings, get_settings

@pytest.fixture(scope="session")
def base_url() -> str:
    url = os.getenv("GROCEREASE_BASE_URL")
    if not url:
        pytest.skip("GROCEREASE_BASE_URL not set; skipping live API tests")
    return url.rstrip("/")

@pytest.fixture
def settings() -> NotificationSettings:
    return NotificationSettings(resend_api_key="re_test_key", email_from="alerts@grocerease.test")

@pytest.fixture
def sent_emails(monkeypatch):
    """Replaces resend.Emails.send and records every payload handed to it"""
    sent = []

    def fake_send(params, options=None):
        sent.append({"params": params, "api_key": resend.api_key})
        return {"id": "abc123"}

    monkeypatch.setattr(resend.Emails, "send", fake_send)
    return sent

@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
