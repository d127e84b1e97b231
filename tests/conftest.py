"""
Shared test fixtures — fresh in-memory storage and sessions, test client, admin login.
"""

import os
import pytest
from fastapi.testclient import TestClient

# Settings are read at import time
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["SESSION_SECRET"] = "test-secret-key-for-testing-only"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "admin123"

from omav.auth import MemorySessionStore, ensure_admin_user, get_session_store
from omav.main import app
from omav.storage import MemStorage, get_storage


@pytest.fixture
def storage():
    """Fresh seeded MemStorage with the admin account, per test."""
    mem = MemStorage()
    ensure_admin_user(mem)
    return mem


@pytest.fixture
def sessions():
    return MemorySessionStore()


@pytest.fixture
def client(storage, sessions):
    """FastAPI test client wired to this test's storage and session store."""
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_session_store] = lambda: sessions
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client):
    """Test client already holding an admin session cookie."""
    response = client.post("/api/admin/login", json={
        "username": "admin",
        "password": "admin123",
    })
    assert response.status_code == 200
    return client


@pytest.fixture
def contact_payload():
    """A complete, valid full contact form as the site posts it."""
    return {
        "name": "Ravi Kumar",
        "phone": "9876543210",
        "email": "ravi@example.com",
        "city": "Patna",
        "landSize": "2400 sq ft",
        "landDimensionNorthFeet": "40",
        "landDimensionNorthInches": "6",
        "landDimensionSouthFeet": "40",
        "landDimensionSouthInches": "",
        "landDimensionEastFeet": "60",
        "landDimensionEastInches": "0",
        "landDimensionWestFeet": "60",
        "landDimensionWestInches": "0",
        "landFacing": "East",
        "projectType": "Residential",
        "message": "Looking for a G+2 house.",
    }
