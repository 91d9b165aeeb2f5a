# taskmanager/repository.py
"""Session-backed storage for tasks."""

from typing import Optional

from sqlmodel import Session, select

from taskmanager.models import Task


class TaskRepository:
    """Thin data-access wrapper around a SQLModel session.

    ``save`` and ``delete`` each commit, so every call is one unit of work.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_all(self) -> list[Task]:
        statement = select(Task).order_by(Task.id)
        return list(self._session.exec(statement).all())

    def find_by_id(self, task_id: int) -> Optional[Task]:
        return self._session.get(Task, task_id)

    def save(self, task: Task) -> Task:
        """Insert *task* when it has no id, otherwise update the existing row."""
        self._session.add(task)
        self._session.commit()
        self._session.refresh(task)
        return task

    def delete(self, task: Task) -> None:
        self._session.delete(task)
        self._session.commit()
