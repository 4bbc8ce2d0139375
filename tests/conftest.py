import os

# Settings are read at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["API_SECRET"] = "test-secret-key"
os.environ["SESSION_SECRET"] = "test-session-secret"

from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from villa_api.database import Base, enable_sqlite_foreign_keys, get_db
from villa_api.main import app as api_app
import villa_api.models  # noqa: F401  registers tables on Base.metadata

ADMIN = {"username": "admin", "name": "Admin User", "password": "admin-pass", "role": "admin"}
CUSTOMER = {"username": "alice", "name": "Alice", "password": "secret", "role": "customer"}


@pytest.fixture
def engine():
    """In-memory SQLite shared by every session in a test, with FK enforcement"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def api_client(session_factory) -> Iterator[TestClient]:
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    api_app.dependency_overrides[get_db] = override_get_db
    with TestClient(api_app) as client:
        yield client
    api_app.dependency_overrides.clear()


def register(client: TestClient, user: dict) -> dict:
    response = client.post("/api/v1/users/register", json=user)
    assert response.status_code == 200, response.text
    return response.json()["result"]


def login(client: TestClient, username: str, password: str) -> str:
    response = client.post("/api/v1/users/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["result"]["token"]


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(api_client) -> dict:
    register(api_client, ADMIN)
    return bearer(login(api_client, ADMIN["username"], ADMIN["password"]))


@pytest.fixture
def customer_headers(api_client) -> dict:
    register(api_client, CUSTOMER)
    return bearer(login(api_client, CUSTOMER["username"], CUSTOMER["password"]))


def create_villa(client: TestClient, headers: dict, **fields) -> dict:
    payload = {"name": "Lake House", "capacity": 4, "rate": 150.0, "sqft": 800}
    payload.update(fields)
    response = client.post("/api/v1/villas", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["result"]
