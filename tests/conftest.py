"""
Shared test fixtures.

Tests run against an in-memory SQLite database and an in-memory blob
store; the environment below is set before any ``app`` module reads the
settings.
"""

import os

os.environ.setdefault("SECRET_KEY", "pitchside-test-secret-key-0123456789abcdef")
os.environ.setdefault("DATABASE_URI", "sqlite://")

from typing import Optional

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.core.security import get_password_hash
from app.models.user import User
from app.storage.base import BlobStore, StorageError


class InMemoryBlobStore(BlobStore):
    """Blob store keeping files in a dict.  ``fail_with`` makes every
    upload fail with that message."""

    def __init__(self):
        self.files: dict[str, bytes] = {}
        self.uploads: list[tuple[str, bool]] = []
        self.fail_with: Optional[str] = None

    def upload(self, path, content, content_type=None, overwrite=False):
        self.uploads.append((path, overwrite))
        if self.fail_with:
            raise StorageError(self.fail_with)
        if path in self.files and not overwrite:
            raise StorageError("The resource already exists")
        self.files[path] = content

    def get_public_url(self, path):
        return f"https://cdn.pitchside.io/avatars/{path}"


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def blob_store():
    return InMemoryBlobStore()


@pytest.fixture
def make_user(session):
    """Factory inserting a user row directly."""

    def _make_user(email: str = "player@pitchside.io", role: str = "player", full_name: str = "Test User") -> User:
        user = User(email=email, hashed_password=get_password_hash("password123"), full_name=full_name, role=role)
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def client(session, blob_store):
    """TestClient sharing the test session and the in-memory blob store."""
    from fastapi.testclient import TestClient

    from app.api.dependencies import get_blob_store
    from app.db.session import get_db
    from app.main import app

    def _get_db():
        yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_blob_store] = lambda: blob_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Register an account and return ``(user_json, auth_headers)``."""

    def _register(email: str, role: str = "player", full_name: str = "Test User", password: str = "password123"):
        response = client.post("/api/v1/auth/register",
                               json={"email": email, "password": password, "full_name": full_name, "role": role})
        assert response.status_code == 201, response.text
        token = client.post("/api/v1/auth/token", json={"email": email, "password": password})
        assert token.status_code == 200, token.text
        return response.json(), {"Authorization": f"Bearer {token.json()['access_token']}"}

    return _register
