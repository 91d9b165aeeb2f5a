# taskmanager/database.py
"""Database engine, session factory, and additive schema migration using SQLModel."""

import logging

from sqlalchemy import Column, inspect, text
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from taskmanager.config import DATABASE_URL, SQL_ECHO

logger = logging.getLogger(__name__)

_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, echo=SQL_ECHO, connect_args=_connect_args)


def _column_default(column: Column) -> str:
    """DEFAULT clause for a column added to a populated table.

    SQLite refuses ``ADD COLUMN ... NOT NULL`` without a default. The NOT NULL
    columns of ``task`` besides the key are all text, so existing rows get
    an empty string.
    """
    return "" if column.nullable else " DEFAULT ''"


def add_missing_columns(bind: Engine = engine) -> list[str]:
    """Add model columns that the live tables lack.

    Existing columns and data are left alone; nothing is ever dropped.
    Returns the ``table.column`` names that were added.
    """
    inspector = inspect(bind)
    existing_tables = set(inspector.get_table_names())
    added: list[str] = []

    for table_name, table in SQLModel.metadata.tables.items():
        if table_name not in existing_tables:
            continue

        db_col_names = {col["name"] for col in inspector.get_columns(table_name)}
        missing = [col for col in table.columns if col.name not in db_col_names]
        if not missing:
            continue

        with bind.begin() as conn:
            for col in missing:
                col_type = col.type.compile(dialect=bind.dialect)
                nullable = "" if col.nullable else " NOT NULL"
                stmt = (
                    f'ALTER TABLE "{table_name}" '
                    f'ADD COLUMN "{col.name}" {col_type}{nullable}{_column_default(col)}'
                )
                logger.info("  %s", stmt)
                conn.execute(text(stmt))
                added.append(f"{table_name}.{col.name}")

    if added:
        logger.info("Added columns: %s", ", ".join(added))
    return added


def create_db_and_tables(bind: Engine = engine) -> None:
    """Create missing tables from SQLModel metadata, then add missing columns."""
    SQLModel.metadata.create_all(bind)
    add_missing_columns(bind)


def get_session():
    """Yield a database session for FastAPI dependency injection."""
    with Session(engine) as session:
        yield session
