# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.
"""

import json
from collections import Counter
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from core.config import settings
from core.permission_resolver import PermissionResolver
from dependencies.auth import CurrentUser, get_current_user
from main import create_app


ROLE_PERMISSIONS_KEY = settings.ROLE_PERMISSIONS_SETTING_KEY
CUSTOM_ROLES_KEY = settings.CUSTOM_ROLES_SETTING_KEY


class FakeSettingsStore:
    """In-memory settings store that counts reads per key."""

    def __init__(self, documents=None):
        self.documents = dict(documents or {})
        self.reads = Counter()
        self.fail_reads = False
        self.fail_writes = False

    def get(self, key):
        self.reads[key] += 1
        if self.fail_reads:
            raise ConnectionError("settings store unreachable")
        return self.documents.get(key)

    def upsert(self, key, value):
        if self.fail_writes:
            raise RuntimeError("write failed")
        self.documents[key] = value

    def delete(self, key):
        if self.fail_writes:
            raise RuntimeError("write failed")
        self.documents.pop(key, None)


class FakeClock:
    def __init__(self, start: float = 1_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def store() -> FakeSettingsStore:
    return FakeSettingsStore()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def resolver(store, clock) -> PermissionResolver:
    return PermissionResolver.from_store(store, ttl_seconds=300, clock=clock)


@pytest.fixture
def custom_role_doc():
    """Build one stored custom role entry (camelCase, as persisted)."""

    def build(name, permissions=(), **overrides):
        doc = {
            "name": name,
            "label": name.replace("_", " ").title(),
            "color": "bg-teal-100 text-teal-800",
            "description": f"{name} custom role",
            "defaultRoute": "/admin/projects",
            "permissions": list(permissions),
        }
        doc.update(overrides)
        return doc

    return build


@pytest.fixture
def store_custom_roles(store):
    def write(*roles):
        store.documents[CUSTOM_ROLES_KEY] = json.dumps(list(roles))

    return write


@pytest.fixture
def store_role_matrix(store):
    def write(matrix):
        store.documents[ROLE_PERMISSIONS_KEY] = json.dumps(matrix)

    return write


# -----------------------------------------------------
# HTTP fixtures
# -----------------------------------------------------
@pytest.fixture
def current_user() -> CurrentUser:
    """Mutable user returned by the overridden auth dependency."""
    return CurrentUser(
        id="test-user-id",
        email="admin@example.com",
        role="SENIOR_ADMIN",
    )


@pytest.fixture(scope="function")
def app(resolver, current_user):
    """Create a test FastAPI application instance."""
    application = create_app(permission_resolver=resolver)
    application.dependency_overrides[get_current_user] = lambda: current_user
    return application


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client
