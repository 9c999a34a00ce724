"""Play Log - store entry point.

The host resolves a store location and calls initialize_store() once at
startup. The returned Database is the only handle to the store and is
passed explicitly to whatever needs it.
"""

from __future__ import annotations

from pathlib import Path

from playlog.core.db import (
    DashboardStatistics,
    Database,
    ExecutableDetails,
    Game,
    LogEntry,
    LogEntryInput,
    LogEntryUpdate,
    LogStatus,
    UserSettings,
)

__all__ = [
    "DashboardStatistics",
    "Database",
    "ExecutableDetails",
    "Game",
    "LogEntry",
    "LogEntryInput",
    "LogEntryUpdate",
    "LogStatus",
    "UserSettings",
    "initialize_store",
    "open_default_store",
]


def initialize_store(location: str | Path) -> Database:
    """Open or create the store at an already-resolved location.

    Creates the containing directory and the file if needed and applies
    the schema. Safe to call again on an existing store.

    Args:
        location: Path to the SQLite file, or ":memory:".

    Returns:
        The store handle.

    Raises:
        StorageInitError: If the directory, file or schema cannot be set up.
    """
    return Database(location)


def open_default_store() -> Database:
    """Open the store at the configured default location.

    Returns:
        The store handle for ``config.database_path``.
    """
    from playlog.config import config

    return initialize_store(config.database_path)
