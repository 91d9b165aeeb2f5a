"""Shared fixtures: in-memory database, repository, service and test clients."""

from datetime import date
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from taskmanager.database import get_session
from taskmanager.dependencies import get_task_service
from taskmanager.main import app
from taskmanager.models import Task, TaskStatus
from taskmanager.repository import TaskRepository
from taskmanager.service import TaskService


@pytest.fixture(name="engine")
def engine_fixture():
    """Create a fresh in-memory database for each test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="repository")
def repository_fixture(session: Session) -> TaskRepository:
    return TaskRepository(session)


@pytest.fixture(name="service")
def service_fixture(repository: TaskRepository) -> TaskService:
    return TaskService(repository)


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Create a test client backed by the in-memory session."""
    def get_session_override():
        yield session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="mock_service")
def mock_service_fixture() -> MagicMock:
    return MagicMock(spec=TaskService)


@pytest.fixture(name="mocked_client")
def mocked_client_fixture(mock_service: MagicMock):
    """Create a test client whose endpoints talk to a mocked service."""
    app.dependency_overrides[get_task_service] = lambda: mock_service
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


def _make_task(**overrides) -> Task:
    fields = {
        "id": 1,
        "title": "Test Task",
        "description": "Test Description",
        "status": TaskStatus.TODO,
        "due_date": date(2026, 1, 15),
    }
    fields.update(overrides)
    return Task(**fields)


@pytest.fixture(name="make_task")
def make_task_fixture():
    """Factory for persisted-looking tasks with sensible defaults."""
    return _make_task
