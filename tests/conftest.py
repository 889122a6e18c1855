"""
Campus Library Backend — Test Configuration (conftest.py)
==========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   The environment is pointed at a throwaway SQLite database and upload
       directory before any campus_library module is imported, because
       settings, the engine and the file service are built at import time.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock database session for service unit tests
    ├── temp_storage: Temporary directory for file operations
    ├── db_schema: Creates every table before the test, drops them after
    ├── client: HTTPX AsyncClient without a session
    ├── admin_client: HTTPX AsyncClient logged in as the configured admin
    └── card_application: Helper posting a library card application
"""

import os
import tempfile

# Must run before campus_library is imported anywhere
_TEST_DIR = tempfile.mkdtemp(prefix="campus_library_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/test.db"
os.environ["STORAGE_ROOT"] = os.path.join(_TEST_DIR, "uploads")
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ADMIN_EMAIL"] = "admin@gcmn.edu.pk"
os.environ["ADMIN_PASSWORD"] = "admin123"
os.environ["ADMIN_SECRET_KEY"] = "gcmn-admin-2024"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from campus_library.database import create_all_tables, drop_all_tables  # noqa: E402

ADMIN_LOGIN = {
    "email": "admin@gcmn.edu.pk",
    "password": "admin123",
    "secretKey": "gcmn-admin-2024",
}

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<<>>\nendobj\ntrailer\n<<>>\n%%EOF\n"


def card_application_body(**overrides):
    body = {
        "firstName": "Ayesha",
        "lastName": "Khan",
        "fatherName": "Imran Khan",
        "dob": "2003-04-12",
        "class": "BSCS",
        "field": "Computer Science",
        "rollNo": "CS-041",
        "email": "ayesha@example.com",
        "phone": "03001234567",
        "addressStreet": "12 College Road",
        "addressCity": "Mianwali",
        "addressState": "Punjab",
        "addressZip": "42200",
        "password": "card-pass",
    }
    body.update(overrides)
    return body


# ══════════════════════════════════════════════════════════════════════════
# Unit-test fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = book
            result = await book_service.get(mock_db_session, book_id)
    """
    session = AsyncMock()
    session.execute = AsyncMock(return_value=MagicMock())
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def temp_storage(tmp_path):
    storage_dir = tmp_path / "storage"
    storage_dir.mkdir()
    return str(storage_dir)


# ══════════════════════════════════════════════════════════════════════════
# API fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_schema():
    await create_all_tables()
    yield
    await drop_all_tables()


@pytest_asyncio.fixture
async def client(db_schema):
    """
    HTTPX AsyncClient talking to the app through ASGITransport.

    Cookies persist between calls, so a login on this client carries over
    to its later requests.
    """
    from campus_library.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def admin_client(db_schema):
    from campus_library.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        response = await c.post("/api/auth/login", json=ADMIN_LOGIN)
        assert response.status_code == 200, response.text
        yield c


@pytest.fixture
def card_application(client):
    """Returns a coroutine function that submits an application and returns its JSON."""

    async def _apply(**overrides):
        response = await client.post("/api/library-card/apply", json=card_application_body(**overrides))
        assert response.status_code == 200, response.text
        return response.json()

    return _apply
