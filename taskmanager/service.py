# taskmanager/service.py
"""Task business operations on top of the repository."""

import logging

from taskmanager.errors import TaskNotFoundError
from taskmanager.models import Task
from taskmanager.repository import TaskRepository
from taskmanager.schemas import TaskPayload

logger = logging.getLogger(__name__)


class TaskService:
    """CRUD over tasks with exists-or-fail lookups.

    Updates overwrite ``title``, ``description``, ``status`` and ``due_date``
    wholesale. Fields left out of the payload are cleared, never merged.
    """

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def get_all_tasks(self) -> list[Task]:
        return self._repository.find_all()

    def get_task_by_id(self, task_id: int) -> Task:
        task = self._repository.find_by_id(task_id)
        if task is None:
            logger.warning("Task %s not found", task_id)
            raise TaskNotFoundError(task_id)
        return task

    def create_task(self, payload: TaskPayload) -> Task:
        task = Task(**payload.model_dump(exclude={"id"}))
        task = self._repository.save(task)
        logger.info("Created task %s", task.id)
        return task

    def update_task(self, task_id: int, payload: TaskPayload) -> Task:
        task = self.get_task_by_id(task_id)
        task.title = payload.title
        task.description = payload.description
        task.status = payload.status
        task.due_date = payload.due_date
        task = self._repository.save(task)
        logger.info("Updated task %s", task_id)
        return task

    def delete_task(self, task_id: int) -> None:
        task = self.get_task_by_id(task_id)
        self._repository.delete(task)
        logger.info("Deleted task %s", task_id)
