import pytest

from app import create_app
from db import database


@pytest.fixture
def app():
    app = create_app("testing")
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session():
    engine = database.make_engine("sqlite://")
    database.init_database(engine)
    db = database.make_session_factory(engine)()
    yield db
    db.close()


@pytest.fixture
def registered(client):
    """Register a user; the client keeps the login session."""
    resp = client.post("/api/register", json={
        "name": "Ada",
        "email": "Ada@Example.com",
        "password": "secret123",
    })
    assert resp.status_code == 201
    return resp.get_json()["user"]
