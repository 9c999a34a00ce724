"""Database package.

All mixins compose into the Database class via multiple inheritance.
ConnectionBase.__init__ opens the connection and then calls
SchemaMixin._ensure_schema() to create any missing tables.
"""

from __future__ import annotations

from playlog.core.db.connection import ConnectionBase
from playlog.core.db.executable_queries import ExecutableQueryMixin
from playlog.core.db.game_queries import GameQueryMixin
from playlog.core.db.log_queries import LogQueryMixin
from playlog.core.db.models import (
    DashboardStatistics,
    ExecutableDetails,
    Game,
    LogEntry,
    LogEntryInput,
    LogEntryUpdate,
    LogStatus,
    UserSettings,
)
from playlog.core.db.schema import SchemaMixin
from playlog.core.db.settings_queries import SettingsMixin
from playlog.core.db.statistics_queries import StatisticsMixin

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
]


class Database(
    SchemaMixin,
    LogQueryMixin,
    GameQueryMixin,
    StatisticsMixin,
    ExecutableQueryMixin,
    SettingsMixin,
    ConnectionBase,
):
    """Store handle composing all query mixins.

    Owns one SQLite connection; every public method holds the handle's
    lock for its full duration.
    """
