"""
Pytest configuration and fixtures.
"""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import enable_sqlite_foreign_keys, init_db, get_session_factory
from core.security import create_access_token, get_password_hash
from models import User, Friendship
from services.directory import SqlUserDirectory, SqlFriendshipRegistry
from services.message_service import MessagingService

PASSWORD = "password"


@pytest.fixture(scope='session')
def password_hash():
    """Hash once per session, bcrypt is slow."""
    return get_password_hash(PASSWORD)


@pytest.fixture
def engine():
    """In-memory SQLite shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    init_db(bind=engine)
    yield engine
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
def users(session_factory, password_hash):
    """Charles, Rick, Michelle and Steph; friendships Charles-Rick and Rick-Steph."""
    names = ["Charles", "Rick", "Michelle", "Steph"]
    session = session_factory()
    try:
        session.add_all([
            User(username=name, email=f"{name.lower()}@example.com", password_hash=password_hash)
            for name in names
        ])
        session.flush()
        session.add_all([
            Friendship(user_a="Charles", user_b="Rick"),
            Friendship(user_a="Rick", user_b="Steph"),
        ])
        session.commit()
    finally:
        session.close()
    return names


@pytest.fixture
def service(session_factory, users):
    return MessagingService(
        session_factory,
        SqlUserDirectory(session_factory),
        SqlFriendshipRegistry(session_factory),
    )


class BrokenSession:
    """Session stand-in whose every statement fails like a lost connection."""

    def __init__(self):
        self.rolled_back = False
        self.closed = False

    def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is down"))

    query = add = commit = refresh = execute = _fail

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


@pytest.fixture
def broken_sessions():
    """Session factory handing out BrokenSession objects; keeps them for inspection."""
    created = []

    def factory():
        session = BrokenSession()
        created.append(session)
        return session

    factory.created = created
    return factory


@pytest.fixture
def client(session_factory, users):
    """Test client wired to the in-memory database."""
    from fastapi.testclient import TestClient
    from main import app

    app.dependency_overrides[get_session_factory] = lambda: session_factory
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def make(username):
        token = create_access_token(data={"sub": username})
        return {"Authorization": f"Bearer {token}"}
    return make
