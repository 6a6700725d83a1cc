"""Test fixtures and configuration."""
import os
from collections.abc import Generator

# Read once by the cached settings when the app module is imported
os.environ.setdefault("OTEL_ENABLED", "false")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import Engine, create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from organizer.config import Settings  # noqa: E402
from organizer.core.context import AppContext, set_context  # noqa: E402
from organizer.database import Base, create_tables  # noqa: E402
from organizer.main import app  # noqa: E402
from organizer.store import Store  # noqa: E402


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Get test settings."""
    return Settings(
        database_url="sqlite://",
        environment="test",
        otel_enabled=False,
    )


@pytest.fixture(scope="function")
def db_engine(test_settings) -> Generator[Engine, None, None]:
    """Create a test database engine."""
    engine = create_engine(
        test_settings.database_url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a test database session."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def store(test_settings, db_engine) -> Store:
    """Create a store bound to the test engine."""
    return Store(test_settings, engine=db_engine)


@pytest.fixture(scope="function")
def file_store(tmp_path) -> Generator[Store, None, None]:
    """Create a store on a file database, for tests that use several threads."""
    settings = Settings(
        database_url=f"sqlite:///{tmp_path / 'organizer.db'}",
        environment="test",
        otel_enabled=False,
    )
    file_store = Store(settings)
    file_store.create_tables()
    yield file_store
    file_store.dispose()


@pytest.fixture(scope="function")
def context(test_settings, store) -> AppContext:
    """Create an application context around the test store."""
    return AppContext(settings=test_settings, store=store)


@pytest.fixture(scope="function")
def client(context) -> Generator[TestClient, None, None]:
    """Create a test client."""
    set_context(context)

    with TestClient(app) as test_client:
        yield test_client

    set_context(None)


@pytest.fixture
def test_user_data():
    """Sample user data for testing."""
    return {
        "username": "testuser",
        "password": "TestPassword123!",
    }


@pytest.fixture
def registered_user(client: TestClient, test_user_data) -> str:
    """Register the sample user and return its id."""
    response = client.post("/user/create", json=test_user_data)
    assert response.status_code == 200
    return response.json()["userID"]


@pytest.fixture
def test_task_data(registered_user):
    """Sample task owned by the registered user."""
    return {
        "id": "task-1",
        "name": "Test Task",
        "isComplete": False,
        "owner": registered_user,
    }
