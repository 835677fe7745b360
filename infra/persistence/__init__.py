"""SQLite-backed persistence adapters for domain repository ports."""

from .sqlite_outcome_repository import SQLiteOutcomeRepository

__all__ = ["SQLiteOutcomeRepository"]
