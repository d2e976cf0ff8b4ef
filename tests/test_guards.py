# tests/test_guards.py

from datetime import timedelta

import pytest

from taskboard.config.settings import Settings
from taskboard.utils.auth import parse_bearer
from taskboard.utils.security import create_access_token

ADMIN_ROUTES = [
    ("GET", "/api/admin/users"),
    ("PUT", "/api/admin/user/abc"),
    ("DELETE", "/api/admin/user/abc"),
    ("GET", "/api/admin/users/abc/tasks"),
    ("GET", "/api/admin/tasks"),
    ("PUT", "/api/admin/task/abc"),
    ("DELETE", "/api/admin/task/abc"),
]


@pytest.mark.parametrize(
    "header, expected",
    [
        (None, None),
        ("", None),
        ("Bearer abc.def", "abc.def"),
        ("bearer abc.def", None),
        ("Token abc.def", None),
        ("Bearer", None),
        ("Bearer ", None),
        ("Bearer a b", None),
        ("abc.def", None),
    ],
)
def test_parse_bearer(header, expected):
    assert parse_bearer(header) == expected


def test_missing_header_is_unauthorized(client):
    r = client.get("/api/tasks/")
    assert r.status_code == 401
    assert r.headers["www-authenticate"] == "Bearer"


def test_malformed_header_is_unauthorized(client, alice, auth_headers):
    token = auth_headers(alice)["Authorization"].split(" ")[1]
    r = client.get("/api/tasks/", headers={"Authorization": f"JWT {token}"})
    assert r.status_code == 401


def test_bad_signature_is_unauthorized(client, alice, settings):
    settings_other = Settings(database_url="sqlite://", secret_key="other-secret")
    token = create_access_token({"sub": alice.id}, settings_other)
    r = client.get("/api/tasks/", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401


def test_expired_token_is_unauthorized(client, alice, settings):
    token = create_access_token({"sub": alice.id}, settings, expires_delta=timedelta(minutes=-5))
    r = client.get("/api/tasks/", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401


def test_token_without_subject_is_unauthorized(client, settings):
    token = create_access_token({"role": "user"}, settings)
    r = client.get("/api/tasks/", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401


def test_deleted_user_is_unauthorized(client, alice, auth_headers, session):
    headers = auth_headers(alice)
    session.delete(alice)
    session.commit()

    r = client.get("/api/tasks/", headers=headers)
    assert r.status_code == 401


def test_valid_token_passes(client, alice, auth_headers):
    r = client.get("/api/tasks/", headers=auth_headers(alice))
    assert r.status_code == 200
    assert r.json() == []


@pytest.mark.parametrize("method, path", ADMIN_ROUTES)
def test_admin_routes_forbid_regular_users(client, alice, auth_headers, method, path):
    r = client.request(method, path, headers=auth_headers(alice), json={})
    assert r.status_code == 403
    assert r.json()["detail"] == "Admin access required"


@pytest.mark.parametrize("method, path", ADMIN_ROUTES)
def test_admin_routes_require_authentication(client, method, path):
    r = client.request(method, path, json={})
    assert r.status_code == 401


def test_admin_passes_admin_guard(client, admin, auth_headers):
    r = client.get("/api/admin/users", headers=auth_headers(admin))
    assert r.status_code == 200
