"""
Pytest configuration and shared fixtures for the test suite.
Ensures proper Python path and provides common fixtures for unit and integration tests.
"""
import os
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Keep the app's import-time database out of the working tree.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

# Add project root and src to Python path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
tests_path = Path(__file__).parent
if str(tests_path) not in sys.path:
    sys.path.insert(0, str(tests_path))
src_path = project_root / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from fakes import FailingTextService  # noqa: E402


@pytest.fixture
def failing_service():
    return FailingTextService()


# ----- In-memory DB (for tests that need DB without touching real DB) -----
@pytest.fixture
def in_memory_engine():
    """Create an in-memory SQLite engine for tests."""
    return create_engine("sqlite:///:memory:", echo=False)


@pytest.fixture
def db_session(in_memory_engine):
    """Create an in-memory database session. Uses api.config.Base for schema."""
    from api.config import Base
    import api.models.models  # noqa: F401
    Base.metadata.create_all(in_memory_engine)
    SessionLocal = sessionmaker(bind=in_memory_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def test_user(db_session):
    """Create a test user in the DB."""
    from api.models.models import User
    user = User(email="learner@example.com", hashed_password="x", preferences=None)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user
