import base64

import pytest

import config
from db import get_session
from main import create_app
from services.auth_service import ensure_user
from tests.factories import PartFactory


@pytest.fixture
def app():
    """Application on a fresh in-memory database, no seed data."""
    app = create_app("sqlite://", seed=False)
    app.config["TESTING"] = True
    yield app


@pytest.fixture
def client(app):
    """Return a Flask test client (keeps cookies between requests)."""
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def db_session(app):
    """A session bound to the test database, shared with the factories."""
    session = get_session()
    PartFactory._meta.sqlalchemy_session = session
    yield session
    session.close()


@pytest.fixture
def admin(db_session):
    """Create the admin account and return matching Basic auth headers."""
    ensure_user(db_session, config.ADMIN_USER, config.ADMIN_PASSWORD)
    db_session.commit()
    token = base64.b64encode(
        f"{config.ADMIN_USER}:{config.ADMIN_PASSWORD}".encode()).decode()
    return {"Authorization": f"Basic {token}"}


@pytest.fixture
def bad_auth():
    token = base64.b64encode(b"Admin:wrong").decode()
    return {"Authorization": f"Basic {token}"}
