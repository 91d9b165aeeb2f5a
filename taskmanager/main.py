# taskmanager/main.py
"""FastAPI application for the task manager backend."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskmanager.config import CORS_ORIGINS
from taskmanager.database import create_db_and_tables
from taskmanager.errors import register_exception_handlers
from taskmanager.logging_setup import configure_logging
from taskmanager.routes.tasks import router as tasks_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and bring the schema up to date on startup."""
    configure_logging()
    create_db_and_tables()
    yield


app = FastAPI(title="Task Manager API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)

register_exception_handlers(app)
app.include_router(tasks_router)


@app.get("/api/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "taskmanager-api"}
