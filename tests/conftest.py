"""
Shared fixtures: an in-memory store seeded on first access, and sessions
for each seeded user plus a guest.
"""
import os

# Set testing environment BEFORE any imports
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["LOGIN_DELAY_SECONDS"] = "0"

import pytest

from nxthub.models.session import SessionContext
from nxthub.models.user import Role
from nxthub.repositories.store import InMemoryKeyValueStore


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    """Empty store; collections seed themselves on first read."""
    return InMemoryKeyValueStore()


@pytest.fixture
def marketing_session() -> SessionContext:
    return SessionContext(role=Role.MANAGER, department="Marketing", email="marketing@nxthub.com")


@pytest.fixture
def sales_session() -> SessionContext:
    return SessionContext(role=Role.MANAGER, department="Sales", email="sales@nxthub.com")


@pytest.fixture
def exec_session() -> SessionContext:
    return SessionContext(role=Role.EXECUTIVE, department="Headquarters", email="exec@nxthub.com")


@pytest.fixture
def guest_session() -> SessionContext:
    return SessionContext.guest()
