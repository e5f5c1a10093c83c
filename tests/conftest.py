"""Shared fixtures: an in-memory database rebuilt for every test."""

import os

# Configure before the application reads its settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_TO_FILE"] = "false"
os.environ["SEED_DEFAULT_DATA"] = "true"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select

from hostel_admin.db.init_db import reset_db
from hostel_admin.db.session import SessionLocal
from hostel_admin.main import app
from hostel_admin.models.people import User
from hostel_admin.models.rbac import Role

API = "/api/v1"


@pytest.fixture(autouse=True)
def fresh_database():
    reset_db()
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(db):
    admin = db.scalars(select(User).where(User.is_admin.is_(True))).first()
    return {"X-User-Id": str(admin.id)}


@pytest.fixture
def role_id(db):
    """Id of a seeded global role by name."""

    def _lookup(name):
        return db.scalars(select(Role).where(Role.role_name == name, Role.owner_user_id.is_(None))).one().id

    return _lookup


@pytest.fixture
def make_user(client, admin_headers, role_id):
    """Create a user through the API and return request headers acting as them."""

    def _make(username, role=None):
        payload = {"username": username, "email": f"{username}@hostel.io"}
        if role is not None:
            payload["user_role_id"] = role_id(role)
        response = client.post(f"{API}/admin/users", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.text
        return {"X-User-Id": str(response.json()["data"]["id"])}

    return _make


@pytest.fixture
def make_hostel(client, admin_headers):
    def _make(name="Green Valley", floors=2, rooms=2, city="Pune", **extra):
        payload = {"name": name, "city": city, "total_floors": floors, "rooms_per_floor": rooms, **extra}
        response = client.post(f"{API}/admin/hostels", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make


@pytest.fixture
def make_tenant(client, admin_headers):
    def _make(name, hostel_id=None, room=None, bed=None, status="Active", **extra):
        payload = {"name": name, "hostel_id": hostel_id, "room": room, "bed": bed, "status": status, **extra}
        response = client.post(f"{API}/admin/tenants", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make


@pytest.fixture
def make_employee(client, admin_headers):
    def _make(name, role="staff", hostel_id=None, **extra):
        payload = {"name": name, "role": role, "hostel_id": hostel_id, **extra}
        response = client.post(f"{API}/admin/employees", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make
