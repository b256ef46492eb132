from fastapi.testclient import TestClient
import pytest

from taskboard_platform.taskboard_platform.taskboard_service.auth import PasswordHasher, TokenIssuer
from taskboard_platform.taskboard_platform.taskboard_service.config import Settings
from taskboard_platform.taskboard_platform.taskboard_service.credentials import CredentialStore
from taskboard_platform.taskboard_platform.taskboard_service.db import Base
from taskboard_platform.taskboard_platform.taskboard_service.main import create_app

TEST_SECRET = "test-signing-secret"


@pytest.fixture(scope="session")
def settings(tmp_path_factory):
    db_path = tmp_path_factory.mktemp("db") / "taskboard_test.db"
    return Settings(DATABASE_URL=f"sqlite:///{db_path}", JWT_SECRET=TEST_SECRET, LOG_LEVEL="DEBUG")


@pytest.fixture(scope="session")
def app(settings):
    return create_app(settings)


@pytest.fixture(scope="session")
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture(autouse=True)
def reset_database(app):
    # Drop all tables and recreate them before each test
    Base.metadata.drop_all(bind=app.state.engine)
    Base.metadata.create_all(bind=app.state.engine)


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def hasher():
    return PasswordHasher()


@pytest.fixture
def token_issuer():
    return TokenIssuer(TEST_SECRET)


@pytest.fixture
def credentials(db, hasher):
    return CredentialStore(db, hasher)


def register(client, email, password="Secret123!"):
    """Register through the API and return the issued token."""
    resp = client.post("/register", json={"email": email, "password": password})
    assert resp.status_code == 201
    return resp.json()["token"]


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}
