"""
Shared test fixtures

Environment is configured before the application is imported so settings,
the engine and logging all pick up the test values.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("AUTH_SECRET_KEY", "test-signing-key-for-catalog-tests")
os.environ.setdefault("AUDIT_LOG_FILE", "")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from plastics_catalog.main import app  # noqa: E402
from plastics_catalog.db.base import Base  # noqa: E402
from plastics_catalog.db.session import get_db  # noqa: E402
from plastics_catalog.core.security import create_session_token  # noqa: E402
import plastics_catalog.models  # noqa: E402,F401


# In-memory SQLite shared across connections
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """Create a fresh database for each test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """Create a test client with database override"""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Bearer headers for a signed-in catalog user"""
    token = create_session_token(
        "user-123",
        email="engineer@example.com",
        first_name="Dana",
        last_name="Reyes",
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers():
    """Bearer headers for a second, unrelated user"""
    token = create_session_token("user-456", email="buyer@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def create_material(client, auth_headers):
    """Factory creating a material through the API and returning its JSON"""
    def _create(**overrides):
        payload = {
            "name": "Test Grade",
            "manufacturer": "Acme Polymers",
            "materialType": "ABS",
        }
        payload.update(overrides)
        response = client.post("/api/v1/materials", json=payload, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
