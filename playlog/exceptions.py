"""
Project-wide exception hierarchy for the play log store.
Every failure leaving the store is a subclass of PlayLogError.
"""

from __future__ import annotations

__all__ = [
    "PlayLogError",
    "StorageInitError",
    "QueryExecutionError",
    "NotFoundError",
    "InvalidQueryError",
    "DataIntegrityError",
    "LogValidationError",
]


class PlayLogError(Exception):
    """Root exception for all playlog errors."""


# ── Store lifecycle ───────────────────────────────────────────────────────────


class StorageInitError(PlayLogError):
    """Raised when the store directory, file or schema cannot be set up."""


# ── Queries ───────────────────────────────────────────────────────────────────


class QueryExecutionError(PlayLogError):
    """Raised when SQLite fails while executing a statement."""


class NotFoundError(PlayLogError):
    """Raised when a lookup by id or name matches no row."""


class InvalidQueryError(PlayLogError):
    """Raised for a sort column, sort direction or status filter outside the allow-list."""


class DataIntegrityError(PlayLogError):
    """Raised when a log row references a game that cannot be resolved."""


# ── Input validation ──────────────────────────────────────────────────────────


class LogValidationError(PlayLogError):
    """Raised when a candidate log fails field validation.

    Attributes:
        errors: Mapping of field name to a human-readable message.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__("; ".join(f"{name}: {message}" for name, message in self.errors.items()))
