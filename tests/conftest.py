"""Shared test fixtures for realty-core."""

import pytest

from realty_core.auth import schemas, service, token as auth_token
from realty_core.config import settings
from realty_core.db import DocumentStore
from realty_core.main import create_app


@pytest.fixture(autouse=True)
def fast_bcrypt():
    """Use the minimum bcrypt work factor so tests stay fast."""
    original = settings.bcrypt_work_factor
    settings.bcrypt_work_factor = 4
    yield
    settings.bcrypt_work_factor = original


@pytest.fixture
def store(tmp_path):
    """Create a fresh initialized store in a temp file.

    A file (not :memory:) is needed because every operation opens its own
    connection.
    """
    store = DocumentStore(str(tmp_path / "realty-test.db"))
    store.init_db()
    return store


@pytest.fixture
def app(store):
    """Create the Flask app bound to the test store."""
    app = create_app(store=store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Create test client for API testing."""
    with app.test_client() as client:
        yield client


@pytest.fixture
def test_user(store):
    """Create a test user.

    Returns a tuple of (user, password) where user is the UserResponse schema
    and password is the plain text password.
    """
    password = "TestPass123"
    user = service.create_user(store, schemas.UserCreate(username="testuser", password=password))
    return user, password


@pytest.fixture
def jwt_token(test_user):
    """Generate a JWT token for the test user."""
    user, _password = test_user
    return auth_token.generate_access_token(user)


@pytest.fixture
def auth_headers(jwt_token):
    """Authentication headers with JWT token."""
    return {"Authorization": f"Bearer {jwt_token}"}
