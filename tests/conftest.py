"""
Pytest configuration and fixtures for integration tests.
"""

import os
import sys
import tempfile
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from app.database import get_db
from app.errors import StoreError
from app.main import create_app
from app.schema import create_tables, seed_data


@pytest.fixture(scope="function")
def db_path():
    """
    Temporary database file with an empty products table.
    """
    db_fd, path = tempfile.mkstemp(suffix=".db")

    with get_db(path) as conn:
        create_tables(conn.cursor())

    yield path

    # Cleanup
    os.close(db_fd)
    os.unlink(path)


@pytest.fixture(scope="function")
def client(db_path):
    """
    Test client backed by a fresh, empty products table.
    """
    with TestClient(create_app(database_path=db_path)) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def seeded_client(db_path):
    """Test client whose products table holds the seed rows."""
    with get_db(db_path) as conn:
        seed_data(conn.cursor())

    with TestClient(create_app(database_path=db_path)) as test_client:
        yield test_client


class FailingStore:
    """Store whose every operation fails like a broken driver."""

    def __init__(self, message="disk I/O error"):
        self.message = message
        self.calls = []

    def _fail(self, operation):
        self.calls.append(operation)
        raise StoreError(self.message)

    def fetch_all(self):
        self._fail("fetch_all")

    def insert(self, name, price):
        self._fail("insert")

    def update(self, product_id, name, price):
        self._fail("update")

    def delete(self, product_id):
        self._fail("delete")


@pytest.fixture
def failing_store():
    return FailingStore()


@pytest.fixture
def failing_client(failing_store):
    """Test client whose store raises on every call."""
    with TestClient(create_app(store=failing_store)) as test_client:
        yield test_client


@pytest.fixture
def sample_product():
    return {"name": "Widget", "price": 9.99}
