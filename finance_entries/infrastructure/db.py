"""SQLAlchemy engine setup for the entries database.

The connection URL comes from ``ENTRIES_DB_URL`` (a local ``.env`` file is
honored). One engine is built per process and shared by every store.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from finance_entries.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Return a required setting, loading ``.env`` before looking it up.

    Args:
        name: Variable to look up.

    Returns:
        str: The value, unmodified.

    Raises:
        RuntimeError: When the variable is unset or blank.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Build an engine for ``db_url``.

    SQLite URLs keep the dialect's own pool; server URLs get a small
    ``QueuePool`` that pings connections before handing them out.
    """
    if db_url.startswith("sqlite"):
        return create_engine(db_url, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_entries_engine: Optional[Engine] = None


def get_entries_engine() -> Engine:
    """Return the shared entries engine, creating it on first use."""
    global _entries_engine
    if _entries_engine is None:
        db_url = _get_env_var("ENTRIES_DB_URL")
        _entries_engine = _create_engine(db_url)
    return _entries_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Serves the process-wide engine from :func:`get_entries_engine`."""

    def get_entries_engine(self) -> Engine:
        return get_entries_engine()


__all__ = [
    "get_entries_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
