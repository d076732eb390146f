from __future__ import annotations

import json
import logging

import pytest
from fastapi.testclient import TestClient

from maintrack.app.config import AppConfig
from maintrack.app.web import create_app


@pytest.fixture()
def app():
    return create_app(AppConfig(log_level="DEBUG"))


def _client(app, token: str | None = None) -> TestClient:
    cookies = {"authToken": token} if token else None
    return TestClient(app, cookies=cookies, follow_redirects=False)


def test_unauthenticated_protected_request_redirects_to_login(app) -> None:
    response = _client(app).get("/vehicles")

    assert response.status_code == 307
    assert response.headers["location"] == "/auth/login"


def test_authenticated_login_request_redirects_to_dashboard(app) -> None:
    response = _client(app, token="tok").get("/auth/login")

    assert response.status_code == 307
    assert response.headers["location"] == "/dashboard"


def test_protected_page_is_served_with_no_cache_headers(app) -> None:
    response = _client(app, token="tok").get("/dashboard")

    assert response.status_code == 200
    assert "Dashboard" in response.text
    assert response.headers["cache-control"] == "private, no-cache, no-store, must-revalidate"
    assert response.headers["pragma"] == "no-cache"
    assert response.headers["expires"] == "0"


def test_home_redirects_only_with_session(app) -> None:
    assert _client(app).get("/").status_code == 200

    response = _client(app, token="tok").get("/")
    assert response.status_code == 307
    assert response.headers["location"] == "/dashboard"


def test_auth_pages_are_public_without_session(app) -> None:
    response = _client(app).get("/auth/register")

    assert response.status_code == 200
    assert "cache-control" not in response.headers


def test_health_is_never_guarded(app) -> None:
    response = _client(app).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_custom_cookie_name_is_honoured() -> None:
    app = create_app(AppConfig(token_cookie_name="sessionToken"))

    assert TestClient(app, follow_redirects=False).get("/maintenance").status_code == 307
    client = TestClient(app, cookies={"sessionToken": "tok"}, follow_redirects=False)
    assert client.get("/maintenance").status_code == 200


def test_redirects_are_logged_at_debug(app, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="maintrack.route_guard")

    _client(app).get("/maintenance")

    records = [record for record in caplog.records if record.name == "maintrack.route_guard"]
    assert len(records) == 1
    assert records[0].levelno == logging.DEBUG
    payload = json.loads(records[0].getMessage())
    assert payload == {"event": "route_redirect", "path": "/maintenance", "redirect_to": "/auth/login"}
