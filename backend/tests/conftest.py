import os

os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ITEMS_DATABASE_URL"] = "sqlite://"
os.environ["SEED_DEMO"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from vibe30.core.deps import get_db
from vibe30.db.base import Base
from vibe30.db.items import ItemsBase, get_items_db
from vibe30.db.models.user import User
from vibe30.db.session import enable_sqlite_foreign_keys
from vibe30.services.buckets import BucketStore
from vibe30.services.timer import TimerRegistry
import vibe30.db.models  # noqa: F401


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def _memory_engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    enable_sqlite_foreign_keys(engine)
    return engine


@pytest.fixture
def engine():
    engine = _memory_engine()
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    s = session_factory()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def store(db):
    return BucketStore(db)


def _make_user(db, email: str) -> User:
    u = User(email=email, password_hash="not-a-real-hash")
    db.add(u)
    db.commit()
    db.refresh(u)
    return u


@pytest.fixture
def user(db):
    return _make_user(db, "ana@example.com")


@pytest.fixture
def other_user(db):
    return _make_user(db, "ben@example.com")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def client(session_factory, clock):
    from vibe30.main import app

    items_engine = _memory_engine()
    ItemsBase.metadata.create_all(bind=items_engine)
    items_session = sessionmaker(bind=items_engine, autocommit=False, autoflush=False)

    def _db():
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    def _items_db():
        s = items_session()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _db
    app.dependency_overrides[get_items_db] = _items_db
    app.state.timers = TimerRegistry(clock=clock)
    yield TestClient(app)
    app.dependency_overrides.clear()
    items_engine.dispose()


def signup(client, email: str = "ana@example.com", password: str = "secret123") -> dict:
    r = client.post("/auth/signup", json={"email": email, "password": password})
    assert r.status_code == 201, r.text
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return signup(client)


@pytest.fixture
def signup_as(client):
    return lambda email: signup(client, email=email)
