"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

from finance_entries.infrastructure.logging.logger import get_app_logger

SUPPORTED_BACKENDS = ("sqlalchemy", "memory")
_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class EntriesSettings:
    """Settings for selecting the entry store backend.

    Attributes:
        backend: Store identifier (sqlalchemy or memory).
        create_schema: Whether the SQL store creates its table on startup.
    """

    backend: str = "sqlalchemy"
    create_schema: bool = True

    @classmethod
    def from_env(cls) -> "EntriesSettings":
        """Build settings from environment variables.

        Returns:
            EntriesSettings: Settings sourced from environment variables.
        """
        backend = os.getenv("ENTRY_STORE_BACKEND", "sqlalchemy").strip().lower()
        if backend not in SUPPORTED_BACKENDS:
            get_app_logger().warning(
                f"Unknown ENTRY_STORE_BACKEND '{backend}'. "
                f"Expected one of {', '.join(SUPPORTED_BACKENDS)}."
            )
        raw_schema = os.getenv("ENTRIES_CREATE_SCHEMA", "true")
        create_schema = raw_schema.strip().lower() in _TRUTHY
        return cls(backend=backend, create_schema=create_schema)


__all__ = ["EntriesSettings", "SUPPORTED_BACKENDS"]
