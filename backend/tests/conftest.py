"""
Shared test fixtures and utilities.

The API is exercised against an in-memory database through a ServiceContainer
installed for the duration of each test.
"""

import uuid
import pytest
from datetime import datetime, timezone, timedelta
import jwt  # PyJWT
from fastapi.testclient import TestClient

from api import app
from api.dependencies import ServiceContainer, set_container, reset_container
from shared.config import Settings
from tests.fakes import FakeDatabase


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    captain_id: str = "65f1c0ffee0000000000abcd",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test token the way TokenService signs them.

    Args:
        captain_id: Captain ID to put in ``sub``
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)
    iat = now - timedelta(hours=2) if expired else now

    payload = {
        "sub": captain_id,
        "iat": int(iat.timestamp()),
        "exp": int(exp.timestamp()),
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture
def settings() -> Settings:
    """Settings with a known secret and cheap bcrypt rounds."""
    return Settings(
        jwt_secret=TEST_JWT_SECRET,
        bcrypt_rounds=4,
        db_connect="mongodb://localhost:27017",
        db_name="captains_test",
    )


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def container(fake_db: FakeDatabase, settings: Settings):
    """Install a container wired to the in-memory database."""
    container = ServiceContainer(database=fake_db, settings=settings)
    set_container(container)
    yield container
    reset_container()


@pytest.fixture
def client(container: ServiceContainer) -> TestClient:
    return TestClient(app)


@pytest.fixture
def registration_payload() -> dict:
    """A valid registration body."""
    return {
        "fullname": {"firstname": "A", "lastname": "B"},
        "email": "a@b.com",
        "password": "secret1",
        "vehicle": {"color": "red", "plate": "XY1", "capacity": 4, "type": "car"},
    }


@pytest.fixture
def registered(client: TestClient, registration_payload: dict) -> dict:
    """Register the default captain and return the response body."""
    response = client.post("/captains/register", json=registration_payload)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(registered: dict) -> dict[str, str]:
    """Authorization headers carrying the registered captain's token."""
    return {"Authorization": f"Bearer {registered['token']}"}
