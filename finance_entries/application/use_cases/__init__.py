"""Application use cases package."""

from .get_user_balance import GetUserBalanceUseCase
from .manage_entries import EntryLifecycleService

__all__ = [
    "EntryLifecycleService",
    "GetUserBalanceUseCase",
]
