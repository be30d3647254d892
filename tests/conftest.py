"""
Pytest Configuration and Fixtures

Runs the API against an in-memory SQLite database; tables are recreated for
every test.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ["DATABASE_URL"] = "sqlite://"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from booking_app.database import Base, SessionLocal, engine  # noqa: E402
from booking_app.main import app  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    """Fresh schema per test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    """Provide a database session."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    """Provide API client for testing."""
    return TestClient(app)


def _signup(client, email, role, name="Test User", password="password123"):
    response = client.post(
        "/auth/signup",
        json={"email": email, "password": password, "name": name, "type": role},
    )
    assert response.status_code == 201, response.text
    body = response.json()
    return {"user": body["user"], "token": body["token"]}


def _headers(account):
    return {"Authorization": f"Bearer {account['token']}"}


@pytest.fixture
def auth_headers():
    """Build bearer headers for an account returned by signup/login."""
    return _headers


@pytest.fixture
def admin(client):
    """Bootstrap admin account."""
    response = client.post(
        "/auth/admin-signup",
        json={"email": "admin@example.com", "password": "password123", "name": "Admin"},
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def client_a(client):
    return _signup(client, "alice@example.com", "CLIENT", name="Alice")


@pytest.fixture
def client_c(client):
    return _signup(client, "carol@example.com", "CLIENT", name="Carol")


@pytest.fixture
def provider_b(client):
    return _signup(client, "bob@example.com", "PROVIDER", name="Bob")


@pytest.fixture
def provider_d(client):
    return _signup(client, "dave@example.com", "PROVIDER", name="Dave")


@pytest.fixture
def service_s(client, admin):
    response = client.post(
        "/services",
        json={"name": "Deep clean", "description": "Whole apartment", "price": 120.0},
        headers=_headers(admin),
    )
    assert response.status_code == 201, response.text
    return response.json()["service"]


@pytest.fixture
def booking(client, client_a, provider_b, service_s):
    """A PENDING booking of S by A from B."""
    response = client.post(
        "/bookings",
        json={
            "serviceId": service_s["id"],
            "providerId": provider_b["user"]["id"],
            "bookingDate": "2030-05-01T10:00:00Z",
        },
        headers=_headers(client_a),
    )
    assert response.status_code == 201, response.text
    return response.json()["booking"]
