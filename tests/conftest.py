"""
Shared fixtures: an in-memory database, a session on it and an HTTP client.

Run:  pytest tests/ -v
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from hypot.core.config import Settings
from hypot.main import create_app
from hypot.models.database import Database
from hypot.models.user import User
from hypot.services import identity

# scrypt is deliberately slow, tests do not need that
FAST_HASH = "pbkdf2:sha256:1000"


@pytest.fixture
def database():
    database = Database("sqlite://")
    database.create_all()
    yield database
    database.drop_all()
    database.dispose()


@pytest.fixture
def db(database):
    with database.session() as session:
        yield session


@pytest.fixture
def settings():
    return Settings(database_url="sqlite://", password_hash_method=FAST_HASH, _env_file=None)


@pytest.fixture
def client(settings, database):
    app = create_app(settings=settings, database=database)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_user(db):
    """Register and log in a user, returning ``(user_id, token)``."""

    def _make_user(username, password="pw", name=None, premium=False, admin=False):
        registered = identity.register_user(db, username, name or username.title(), password, hash_method=FAST_HASH)
        assert registered.status, registered
        if premium or admin:
            user = db.get(User, registered.data["id"])
            user.premium = premium
            user.admin = admin
            db.commit()
        login = identity.login_user(db, username, password)
        assert login.status, login
        return login.data["id"], login.data["session"]

    return _make_user


@pytest.fixture
def miss_first_lookup(db, monkeypatch):
    """Make the next ``db.query(model)`` find nothing, as if another writer had not committed yet."""

    def _miss_first_lookup(model):
        real_query = db.query
        missed = []

        def query(*entities, **kwargs):
            if entities == (model,) and not missed:
                missed.append(model)
                missing = MagicMock()
                missing.filter.return_value.first.return_value = None
                return missing
            return real_query(*entities, **kwargs)

        monkeypatch.setattr(db, "query", query)

    return _miss_first_lookup
