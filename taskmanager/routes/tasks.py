# taskmanager/routes/tasks.py
"""CRUD endpoints for tasks."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from taskmanager.dependencies import get_task_service
from taskmanager.models import Task
from taskmanager.schemas import TaskPayload, TaskRead
from taskmanager.service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])

# Ids are stored as signed 64-bit INTEGER; anything outside is rejected before lookup.
TaskId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


@router.get("", response_model=list[TaskRead])
def list_tasks(service: TaskService = Depends(get_task_service)) -> list[Task]:
    """List all tasks."""
    return service.get_all_tasks()


@router.get("/{task_id}", response_model=TaskRead)
def get_task(task_id: TaskId, service: TaskService = Depends(get_task_service)) -> Task:
    """Get a single task by ID."""
    return service.get_task_by_id(task_id)


@router.post("", response_model=TaskRead, status_code=201)
def create_task(
    body: TaskPayload, service: TaskService = Depends(get_task_service)
) -> Task:
    """Create a new task. Any ``id`` in the body is ignored."""
    return service.create_task(body)


@router.put("/{task_id}", response_model=TaskRead)
def update_task(
    task_id: TaskId, body: TaskPayload, service: TaskService = Depends(get_task_service)
) -> Task:
    """Replace every editable field of an existing task."""
    return service.update_task(task_id, body)


@router.delete("/{task_id}", status_code=204)
def delete_task(task_id: TaskId, service: TaskService = Depends(get_task_service)) -> None:
    """Delete a task by ID."""
    service.delete_task(task_id)
