# taskmanager/dependencies.py
"""FastAPI dependency providers wiring session -> repository -> service."""

from fastapi import Depends
from sqlmodel import Session

from taskmanager.database import get_session
from taskmanager.repository import TaskRepository
from taskmanager.service import TaskService


def get_task_repository(session: Session = Depends(get_session)) -> TaskRepository:
    """Build a task repository over the request's database session."""
    return TaskRepository(session)


def get_task_service(
    repository: TaskRepository = Depends(get_task_repository),
) -> TaskService:
    """Build the task service for FastAPI dependency injection."""
    return TaskService(repository)
