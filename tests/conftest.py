import os

# Settings are read once and cached; pin them before anything imports messagely
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_WORK_FACTOR"] = "4"
os.environ["ENVIRONMENT"] = "test"

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from messagely.application.services.credential_store import CredentialStore
from messagely.core.security import build_password_context
from messagely.domain.models.user import User
from messagely.domain.schemas.auth import RegisterRequest
from messagely.infrastructure.database import Base, SessionLocal, engine, init_db
from messagely.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start=datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


def _candidate(username="alice", password="secret1", **overrides):
    fields = {
        "username": username,
        "password": password,
        "first_name": "Alice",
        "last_name": "Liddell",
        "phone": "+14155550000",
    }
    fields.update(overrides)
    return RegisterRequest(**fields)


@pytest.fixture
def db():
    """A session on a fresh in-memory schema."""
    init_db()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def pwd_context():
    return build_password_context(4)


@pytest.fixture
def store(db, pwd_context, clock):
    return CredentialStore(SQLAlchemyUserRepository(db, User), pwd_context, clock)


@pytest.fixture
def make_candidate():
    return _candidate


@pytest.fixture
def client():
    from messagely.main import app

    with TestClient(app) as test_client:
        yield test_client
    Base.metadata.drop_all(bind=engine)
