"""
Shared test fixtures and utilities.

Every test gets a fresh in-memory SQLite database and a Settings object with
a test-only JWT secret, both injected through app.dependency_overrides.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from todolist.config import Settings, get_settings
from todolist.database import Base, get_db
from todolist.main import app


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"
TEST_PASSWORD = "correct-horse-battery"


@pytest.fixture
def settings() -> Settings:
    return Settings(jwt_secret_key=TEST_JWT_SECRET, database_url="sqlite://")


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory, settings):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def join(client: TestClient, role: str, email: str, password: str = TEST_PASSWORD) -> dict:
    """Register a user or admin and return the authorized body."""
    response = client.post(f"/auth/{role}/join", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def user_a(client) -> dict:
    return join(client, "user", "alice@example.com")


@pytest.fixture
def user_b(client) -> dict:
    return join(client, "user", "bob@example.com")


@pytest.fixture
def admin(client) -> dict:
    return join(client, "admin", "root@example.com")
