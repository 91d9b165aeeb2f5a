# taskmanager/schemas.py
"""Request and response bodies for the task endpoints.

JSON field names are camelCase (``dueDate``); python attributes stay
snake_case. Every body field is reported independently on failure, so the
required checks live in validators rather than in pydantic's ``missing``
error.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from taskmanager.models import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH, TaskStatus


class TaskPayload(BaseModel):
    """Body accepted by POST and PUT. A client-supplied ``id`` is parsed but never used."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[int] = None
    title: Optional[str] = Field(default=None, validate_default=True)
    description: Optional[str] = None
    status: Optional[TaskStatus] = Field(default=None, validate_default=True)
    due_date: Optional[date] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> str:
        if v is None or not v.strip():
            raise ValueError("Title is required")
        if len(v) > TITLE_MAX_LENGTH:
            raise ValueError(f"Title must not exceed {TITLE_MAX_LENGTH} characters")
        return v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) > DESCRIPTION_MAX_LENGTH:
            raise ValueError(
                f"Description must not exceed {DESCRIPTION_MAX_LENGTH} characters"
            )
        return v

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: Optional[TaskStatus]) -> TaskStatus:
        if v is None:
            raise ValueError("Status is required")
        return v


class TaskRead(BaseModel):
    """Task representation returned by every endpoint."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    title: str
    description: Optional[str] = None
    status: TaskStatus
    due_date: Optional[date] = None
