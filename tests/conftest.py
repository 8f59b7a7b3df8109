import uuid

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.db.mongodb import get_mongo_db, init_mongo_indexes
from app.main import app


@pytest.fixture
def db():
    """Fresh in-memory database per test, with the production indexes."""
    database = mongomock.MongoClient()[f"school_test_{uuid.uuid4().hex}"]
    init_mongo_indexes(database)
    return database


@pytest.fixture
def client(db):
    app.dependency_overrides[get_mongo_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Register a user through the API and return the response."""
    def _register(username, email, password="secret123", role=None):
        body = {"username": username, "email": email, "password": password}
        if role is not None:
            body["role"] = role
        return client.post("/auth/register", json=body)
    return _register


@pytest.fixture
def admin_headers(register):
    res = register("admin", "admin@school.edu", "admin123", role="admin")
    assert res.status_code == 201
    return {"Authorization": f"Bearer {res.json()['token']}"}


@pytest.fixture
def user_headers(register):
    res = register("regular", "user@school.edu", "user123", role="user")
    assert res.status_code == 201
    return {"Authorization": f"Bearer {res.json()['token']}"}


@pytest.fixture
def make_course(client, admin_headers):
    def _make(title="Mathematics", code="MATH101", credits=4):
        res = client.post(
            "/courses",
            json={"title": title, "code": code, "credits": credits},
            headers=admin_headers
        )
        assert res.status_code == 201, res.json()
        return res.json()
    return _make


@pytest.fixture
def make_student(client, admin_headers):
    def _make(name="John Doe", email="john.doe@example.com", age=20):
        res = client.post(
            "/students",
            json={"name": name, "email": email, "age": age},
            headers=admin_headers
        )
        assert res.status_code == 201, res.json()
        return res.json()
    return _make


@pytest.fixture
def make_teacher(client, admin_headers):
    def _make(name="Dr. Smith", email="dr.smith@example.com"):
        res = client.post(
            "/teachers",
            json={"name": name, "email": email},
            headers=admin_headers
        )
        assert res.status_code == 201, res.json()
        return res.json()
    return _make
