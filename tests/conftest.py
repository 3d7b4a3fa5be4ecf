"""
Shared Test Fixtures

Every test gets its own SQLite database file, a Database built on it and an
application wired to that Database. The TestClient is entered as a context
manager so the startup hook creates the tables.
"""

import pytest
from fastapi.testclient import TestClient

from app.db.session import Database
from app.main import create_app


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture
def database(tmp_path):
    """
    A Database on a throwaway SQLite file.

    check_same_thread is disabled because FastAPI runs sync handlers on a
    threadpool.
    """
    db = Database(
        f"sqlite:///{tmp_path / 'blog.db'}",
        connect_args={"check_same_thread": False},
    )
    yield db
    db.dispose()


@pytest.fixture
def db_session(client, database):
    """A session for inspecting rows directly, including soft-deleted posts."""
    session = database.session()
    yield session
    session.close()


# =============================================================================
# Application Fixtures
# =============================================================================

@pytest.fixture
def client(database):
    """TestClient for an app bound to the per-test database."""
    app = create_app(database=database)
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# Data Factories
# =============================================================================

@pytest.fixture
def make_post(client):
    """
    Create a post through the API and return its JSON representation.

    Usage:
        post = make_post(title="A", category="tech")
    """
    def _make_post(**fields):
        payload = {"title": "A", "category": "tech", "content": "body"}
        payload.update(fields)
        response = client.post("/create-post", json=payload)
        assert response.status_code == 200, response.text
        return response.json()["post"]

    return _make_post


@pytest.fixture
def make_user(client):
    """Create a user through the API and return its JSON representation."""
    def _make_user(user_id="user-1", **fields):
        payload = {
            "id": user_id,
            "displayName": "Taro",
            "photoURL": "https://example.com/taro.png",
            "class": "A",
            "faculty": "Engineering",
            "department": "Computer Science",
            "grade": "3",
            "can": "Python",
            "did": "Built a blog",
            "will": "Ship it",
            "isPublic": True,
        }
        payload.update(fields)
        response = client.post("/create-user", json=payload)
        assert response.status_code == 200, response.text
        return response.json()["data"]

    return _make_user
