"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Users and bearer headers
- The client-side API wrapper bound to the test app
"""

import uuid
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.client.api import JobsApiClient
from app.client.notifications import Notifier
from app.core.database import Base, get_db
from app.core.security import create_access_token, get_password_hash
from app.models.user import User
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_PASSWORD = "TestPass123!"


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _make_user(db_session, email="test@example.com", is_active=True):
    user = User(
        id=uuid.uuid4(),
        email=email,
        hashed_password=get_password_hash(TEST_PASSWORD),
        full_name="Test User",
        is_active=is_active,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def auth_headers_for(user):
    token = create_access_token(str(user.id))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user(db_session):
    return _make_user(db_session)


@pytest.fixture
def other_user(db_session):
    return _make_user(db_session, email="other@example.com")


@pytest.fixture
def auth_headers(user):
    return auth_headers_for(user)


@pytest.fixture
def other_auth_headers(other_user):
    return auth_headers_for(other_user)


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def api_client(client, user):
    """Client-side API wrapper talking to the test app as `user`."""
    token = create_access_token(str(user.id))
    return JobsApiClient(http_client=client, token=token)


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "company": "Acme",
        "position": "Engineer",
        "work_location": "Berlin",
        "work_type": "full-time",
        "status": "pending",
    }


@pytest.fixture
def create_job(client, auth_headers, sample_job_data):
    """Create a job through the API and return its JSON."""
    def _create(headers=None, **overrides):
        payload = {**sample_job_data, **overrides}
        response = client.post("/api/v1/job/create-job", json=payload, headers=headers or auth_headers)
        assert response.status_code == 201, response.text
        return response.json()["job"]
    return _create


@pytest.fixture
def make_user(db_session):
    """Factory for extra users."""
    def _factory(**kwargs):
        return _make_user(db_session, **kwargs)
    return _factory
