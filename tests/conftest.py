# tests/conftest.py

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from main import create_app
from taskboard.config.settings import Settings
from taskboard.database import Database
from taskboard.models import Task, User
from taskboard.utils.security import create_access_token, hash_password


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        secret_key="test-secret",
        algorithm="HS256",
        access_token_expire_minutes=30,
        cors_origins=["http://testserver"],
        log_level="DEBUG",
    )


@pytest.fixture()
def database(settings: Settings):
    """
    Fresh in-memory SQLite per test.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    db = Database(
        settings.database_url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture()
def client(settings: Settings, database: Database) -> TestClient:
    return TestClient(create_app(settings, database))


@pytest.fixture()
def session(database: Database):
    db = database.session()
    yield db
    db.close()


@pytest.fixture()
def make_user(session):
    def _make_user(name="Alice", email="alice@example.com", password="secret123", is_admin=False) -> User:
        user = User(
            name=name,
            email=email,
            hashed_password=hash_password(password),
            is_admin=is_admin,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def make_task(session):
    base = datetime(2024, 1, 1, 12, 0, 0)

    def _make_task(user: User, title="Task", description=None, minutes=0) -> Task:
        task = Task(
            title=title,
            description=description,
            user_id=user.id,
            created_at=base + timedelta(minutes=minutes),
        )
        session.add(task)
        session.commit()
        session.refresh(task)
        return task

    return _make_task


@pytest.fixture()
def auth_headers(settings: Settings):
    def _auth_headers(user: User) -> dict:
        token = create_access_token({"sub": user.id}, settings)
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers


@pytest.fixture()
def admin(make_user) -> User:
    return make_user(name="Admin", email="root@example.com", is_admin=True)


@pytest.fixture()
def alice(make_user) -> User:
    return make_user(name="Alice", email="alice@example.com")


@pytest.fixture()
def bob(make_user) -> User:
    return make_user(name="Bob", email="bob@example.com")
