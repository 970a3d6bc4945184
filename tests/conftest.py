"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points the
application at a throwaway in-memory SQLite database.
"""

import os
import sys
from pathlib import Path

import pytest

TEST_DATABASE_URL = "sqlite+pysqlite:///:memory:"

# Must be set before app.config is imported anywhere. Overrides any exported
# DATABASE_URL so the schema reset below never touches a real database.
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["ENVIRONMENT"] = "testing"

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from domain.models import Base, engine  # noqa: E402


def is_test_database(url) -> bool:
    """True only for the in-memory SQLite database the suite runs against."""
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


@pytest.fixture(autouse=True)
def fresh_schema():
    """Every test starts from empty tables."""
    if not is_test_database(engine.url):
        pytest.exit(
            f"Refusing to drop tables on {engine.url!r}; tests only run on "
            f"{TEST_DATABASE_URL}",
            returncode=1,
        )
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
