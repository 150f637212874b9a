"""
Integration test fixtures. Overrides get_db and the plan generator for API tests.
"""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from fakes import FailingTextService


@pytest.fixture
def override_get_db():
    """Create in-memory engine and session factory for API tests."""
    from api.config import Base
    import api.models.models  # noqa: F401
    # one shared connection: TestClient runs sync endpoints in worker threads
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def _get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    return _get_db


@pytest.fixture
def text_service():
    """Text service behind the smart plan generator; unreachable by default."""
    return FailingTextService()


@pytest.fixture
def api_client(override_get_db, text_service):
    """FastAPI TestClient with in-memory DB and a generator that never leaves the process."""
    from fastapi.testclient import TestClient
    from api.api import app
    from api.bootstrap import get_plan_generator
    from api.config import get_db
    from focus.planner.smart_plan import SmartPlanGenerator

    generator = SmartPlanGenerator(text_service, timeout=1.0)
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_plan_generator] = lambda: generator
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(api_client):
    """Register a user and return its bearer header."""
    response = api_client.post(
        "/auth/register",
        json={"email": "learner@example.com", "password": "testpass123", "confirm_password": "testpass123"},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
