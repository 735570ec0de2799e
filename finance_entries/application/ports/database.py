"""Engine port used by the entry stores.

The SQL entry store asks this port for an engine rather than reading
connection settings itself, so tests can hand it any SQLAlchemy engine.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Supplies the SQLAlchemy engine where the ``entries`` table lives."""

    def get_entries_engine(self) -> Engine:
        """Return the engine for the entries table.

        Returns:
            Engine: Engine whose database holds (or will hold) ``entries``.
        """


__all__ = ["DatabaseEnginePort"]
