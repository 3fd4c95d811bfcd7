"""
Medsite Backend — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   API tests run the real app over httpx's ASGITransport against a fresh
       SQLite database (aiosqlite) per test, built from the table
       declarations. Service unit tests use a mocked Database.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db:       AsyncMock standing in for the Database gateway
    ├── database:      Database over a temporary SQLite file, tables created
    ├── test_client:   HTTPX AsyncClient bound to an app using `database`
    ├── admin_token:   Valid bearer token for a synthetic admin
    └── auth_headers:  {"Authorization": "Bearer <admin_token>"}
"""

import os
import tempfile
from unittest.mock import AsyncMock

# Settings are read at import time; configure them BEFORE any medsite import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="medsite_test_"), "unused.db"
)
os.environ["JWT_SECRET"] = "test-secret-not-for-production-0123456789abcdef"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CREATE_TABLES"] = "false"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from medsite.database import Database  # noqa: E402
from medsite.services.token_service import AdminClaims, token_service  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db():
    """
    Mocked Database gateway for service unit tests.

    Usage:
        mock_db.execute.side_effect = [[], [{"id": 1, "name": "Canada"}]]
        await country_service.create_country(mock_db, "Canada", "flag.png", "...")
    """
    db = AsyncMock(spec=Database)
    db.execute = AsyncMock(return_value=[])
    return db


@pytest_asyncio.fixture
async def database(tmp_path):
    """A Database over a throwaway SQLite file with every table created."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'medsite.db'}")
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def test_client(database):
    """
    HTTPX AsyncClient talking to a fresh app wired to `database`.

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    from medsite.main import create_app

    app = create_app(database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def admin_token():
    """Token the auth gate accepts; the gate does not look the admin up."""
    return token_service.issue(AdminClaims(id=1, username="root"))


@pytest.fixture
def auth_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def college_payload():
    """A complete college body for the seeded country "Canada"."""
    return {
        "name": "Northern Medical University",
        "country": "Canada",
        "state": "Ontario",
        "year_of_establishment": 1995,
        "logo_link": "https://cdn.example.com/nmu.png",
        "intake": "150",
        "duration": "6 years",
        "recognition": "WHO, NMC",
        "medium": "English",
        "intro": "A public medical university.",
        "course_fees": "USD 6,000 per year",
        "admission_eligibility": "50% in PCB",
        "benefits": "Low tuition",
        "campus_info": "Hostel on campus",
    }
