"""Pytest configuration and fixtures."""

import os

# Run Celery tasks inline; must be set before src.config is first imported
os.environ.setdefault("CELERY_TASK_ALWAYS_EAGER", "true")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from src.database import Base, build_engine, get_db  # noqa: E402
from src.main import app  # noqa: E402
from src.models.user import User  # noqa: E402
from src.services.auth import get_password_hash  # noqa: E402
from src.services.item_service import ItemService  # noqa: E402
from src.services.wishlist_service import WishlistService  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores user info."""

    def __init__(self, *args, user_id: str | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/wishlist", "/wishlist_test")
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

engine = build_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    from src import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client, email: str, username: str, name: str | None = None) -> AuthHeaders:
    """Register a user through the API and return their auth headers."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": email, "password": "testpass123", "name": name, "username": username},
    )
    assert response.status_code == 201, response.text
    data = response.json()
    return AuthHeaders(
        {"Authorization": f"Bearer {data['access_token']}"},
        user_id=data["user"]["id"],
        email=email,
    )


@pytest.fixture
def auth_headers(client):
    """Wishlist owner."""
    return register(client, "owner@example.com", "owner", "Wish Owner")


@pytest.fixture
def friend_headers(client):
    """A second user, typically the gift buyer."""
    return register(client, "friend@example.com", "friend", "Gift Buyer")


@pytest.fixture
def stranger_headers(client):
    """A third user with no relationship to the others."""
    return register(client, "stranger@example.com", "stranger", "Stranger")


@pytest.fixture
def make_user(db):
    """Factory for users created directly in the database."""

    def _make_user(username: str) -> User:
        user = User(
            email=f"{username}@example.com",
            password_hash=get_password_hash("testpass123"),
            name=username.title(),
            username=username,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def owner(make_user):
    return make_user("alice")


@pytest.fixture
def buyer(make_user):
    return make_user("bob")


@pytest.fixture
def wishlist(db, owner):
    return WishlistService(db).create_wishlist(owner.id, name="Birthday")


@pytest.fixture
def item(db, owner, wishlist):
    return ItemService(db).add_item(
        wishlist.id,
        owner.id,
        {"title": "Headphones", "url": "https://example.com/headphones", "price": "$50"},
    )
