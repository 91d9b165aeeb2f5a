# taskmanager/errors.py
"""Domain errors and their HTTP translation."""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Task not found"


class TaskNotFoundError(Exception):
    """Raised when no task exists for the requested id."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task not found with id: {task_id}")


def _field_name(loc: tuple) -> str:
    """Map a pydantic error location to the client-facing field key.

    ``("body", "dueDate")`` becomes ``dueDate``; errors about the body as a
    whole (bad JSON, wrong type) only carry ``"body"`` plus an optional
    integer offset.
    """
    names = [part for part in loc[1:] if isinstance(part, str)]
    return ".".join(names) if names else str(loc[0])


def _message(error: dict[str, Any]) -> str:
    if error["type"] == "value_error":
        return str(error["ctx"]["error"])
    return error["msg"]


async def task_not_found_handler(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": NOT_FOUND_MESSAGE})


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report every failing field at once, first message per field wins."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        errors.setdefault(_field_name(error["loc"]), _message(error))
    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(status_code=400, content={"errors": errors})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskNotFoundError, task_not_found_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
