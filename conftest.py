import pytest
from werkzeug.security import generate_password_hash

from app import create_app
from config import Config
from init_db import init_db
from models.api_key import ApiKey
from models.user import User
from services.accounts import generate_token
from services.identity import ApiKeyIdentity, SessionIdentity

PASSWORD = "secret123"


@pytest.fixture
def app(tmp_path):
    database = str(tmp_path / "test.db")

    class TestConfig(Config):
        TESTING = True
        WTF_CSRF_ENABLED = False
        DATABASE = database
        API_KEY_CLAMP_TO_ROLE = False

    init_db(database, admin_password="admin123", admin_email="admin@example.com")
    app = create_app(TestConfig)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield


@pytest.fixture
def make_user(app):
    """Create a user directly in the database and return the model."""

    def _make_user(username, role="viewer", password=PASSWORD, active=True):
        with app.app_context():
            user_id = User.create(username, f"{username}@example.com",
                                  generate_password_hash(password), role)
            if not active:
                User.set_active(user_id, False)
            return User.get_by_id(user_id)

    return _make_user


@pytest.fixture
def make_api_key(app):
    """Mint an API key with an explicit grant and return its token."""

    def _make_api_key(user, permissions, name="test key"):
        with app.app_context():
            token = generate_token()
            ApiKey.create(user.id, token, name, list(permissions))
            return token

    return _make_api_key


@pytest.fixture
def admin(app):
    with app.app_context():
        return User.get_by_username("admin")


def session_identity(user):
    return SessionIdentity(user.id, user.username, user.role)


def api_identity(user, permissions, key_id=1):
    return ApiKeyIdentity(key_id, user.id, tuple(permissions), "test key")


def login(client, username, password=PASSWORD):
    return client.post("/login", data={"username": username, "password": password})
