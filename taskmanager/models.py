# taskmanager/models.py
"""Task table model."""

from datetime import date
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


class TaskStatus(str, Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class Task(SQLModel, table=True):
    """Task database table.

    ``title`` and ``status`` are NOT NULL at the schema level, so rows written
    without going through request validation are still rejected on flush.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    status: TaskStatus
    due_date: Optional[date] = Field(default=None)
