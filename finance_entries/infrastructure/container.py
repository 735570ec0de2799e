"""Composition root for wiring infrastructure adapters."""

from finance_entries.application.ports.database import DatabaseEnginePort
from finance_entries.application.ports.entry_store import EntryStorePort
from finance_entries.application.use_cases.get_user_balance import (
    GetUserBalanceUseCase,
)
from finance_entries.application.use_cases.manage_entries import (
    EntryLifecycleService,
)
from finance_entries.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from finance_entries.infrastructure.entry_store import SqlAlchemyEntryStore
from finance_entries.infrastructure.logging.logger import get_app_logger
from finance_entries.infrastructure.memory_entry_store import (
    InMemoryEntryStore,
)
from finance_entries.infrastructure.settings import EntriesSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_entry_store(
    db_port: DatabaseEnginePort | None = None,
    settings: EntriesSettings | None = None,
) -> EntryStorePort:
    """Return the configured entry store.

    Raises:
        ValueError: When the configured backend is not supported.
    """
    resolved_settings = settings or EntriesSettings.from_env()
    if resolved_settings.backend == "memory":
        return InMemoryEntryStore()
    if resolved_settings.backend == "sqlalchemy":
        resolved_db = db_port or build_database_adapter()
        store = SqlAlchemyEntryStore(resolved_db)
        if resolved_settings.create_schema:
            store.prepare_schema()
        return store
    raise ValueError(
        "Unsupported entry store backend: "
        f"{resolved_settings.backend}. Expected sqlalchemy or memory."
    )


def build_entry_service(
    entry_store: EntryStorePort | None = None,
) -> EntryLifecycleService:
    """Return the entry lifecycle use case."""
    resolved_store = entry_store or build_entry_store()
    return EntryLifecycleService(resolved_store, logger=get_app_logger())


def build_balance_use_case(
    entry_store: EntryStorePort | None = None,
) -> GetUserBalanceUseCase:
    """Return the balance use case."""
    resolved_store = entry_store or build_entry_store()
    return GetUserBalanceUseCase(resolved_store, logger=get_app_logger())


__all__ = [
    "build_database_adapter",
    "build_entry_store",
    "build_entry_service",
    "build_balance_use_case",
]
