# tests/test_seed.py

from taskboard.models import Task, User
from taskboard.seed import ADMIN_EMAIL, ADMIN_PASSWORD, seed_admin
from taskboard.utils.security import verify_password


def test_seed_creates_admin(session):
    admin = seed_admin(session)

    assert admin.email == ADMIN_EMAIL
    assert admin.is_admin is True
    assert verify_password(ADMIN_PASSWORD, admin.hashed_password)


def test_seed_is_idempotent(session):
    first_id = seed_admin(session).id
    second = seed_admin(session)

    assert first_id != second.id
    assert session.query(User).filter(User.email == ADMIN_EMAIL).count() == 1


def test_seed_replaces_demoted_account_and_its_tasks(session, make_user, make_task, alice):
    stale = make_user(name="Old", email=ADMIN_EMAIL, password="whatever", is_admin=False)
    make_task(stale, title="stale")
    kept = make_task(alice, title="alice's")

    admin = seed_admin(session)

    assert admin.is_admin is True
    assert [t.id for t in session.query(Task).all()] == [kept.id]


def test_seeded_admin_can_log_in_and_reach_admin_routes(client, session):
    seed_admin(session)

    r = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert r.status_code == 200
    token = r.json()["access_token"]

    r = client.get("/api/admin/users", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
