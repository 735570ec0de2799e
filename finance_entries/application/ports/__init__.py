"""Application ports package."""

from .database import DatabaseEnginePort
from .entry_store import EntryStorePort

__all__ = [
    "DatabaseEnginePort",
    "EntryStorePort",
]
