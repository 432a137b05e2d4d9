import os

# Settings are read at import time, so point them at SQLite before any app import
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DUPLICATE_INSERT_PAUSE_SECONDS"] = "0"

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from core.auth import get_password_hash
from core.database import get_db
from crud.store import ChangeFeed, EntityStore
from crud.user_crud import create_user_with_password
from main import app
from models.base import Base

test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@event.listens_for(test_engine, "connect")
def _enable_fks(dbapi_conn, _record):
    cur = dbapi_conn.cursor()
    cur.execute("PRAGMA foreign_keys=ON")
    cur.close()


TestingSessionLocal = sessionmaker(bind=test_engine, autocommit=False, autoflush=False)


@pytest.fixture(scope="function")
def test_db() -> Generator[Session, None, None]:
    """Fresh schema per test."""
    Base.metadata.create_all(bind=test_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(scope="function")
def feed() -> ChangeFeed:
    return ChangeFeed()


@pytest.fixture(scope="function")
def store(test_db: Session, feed: ChangeFeed) -> EntityStore:
    return EntityStore(test_db, feed=feed)


@pytest.fixture(scope="function")
def test_user(test_db: Session):
    return create_user_with_password(test_db, "owner@example.com", get_password_hash("secret123"), name="Owner")


@pytest.fixture(scope="function")
def other_user(test_db: Session):
    return create_user_with_password(test_db, "other@example.com", get_password_hash("secret123"), name="Other")


@pytest.fixture(scope="function")
def project(store: EntityStore, test_user) -> dict:
    return store.insert(
        "projects",
        {"name": "Spring launch", "description": "Campaign", "user_id": test_user.id},
    )


@pytest.fixture(scope="function")
def client(test_db: Session) -> Generator[TestClient, None, None]:
    def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def sign_up(client: TestClient):
    """Register an account through the API and return its auth headers."""
    def _sign_up(email: str = "me@example.com", password: str = "secret123") -> dict:
        resp = client.post("/auth/signup", json={"email": email, "password": password, "name": "Me"})
        assert resp.status_code == 201, resp.text
        return {"Authorization": f"Bearer {resp.json()['access_token']}"}

    return _sign_up


@pytest.fixture(scope="function")
def auth_headers(sign_up) -> dict:
    return sign_up()
