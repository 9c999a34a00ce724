"""Record models crossing the store boundary.

Contains the dataclasses returned to and accepted from the host
application, the LogStatus domain, and the row conversion helpers
used by the query mixins.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

__all__ = [
    "DashboardStatistics",
    "ExecutableDetails",
    "Game",
    "LogEntry",
    "LogEntryInput",
    "LogEntryUpdate",
    "LogStatus",
    "UserSettings",
    "date_param",
    "game_from_row",
    "status_param",
]


class LogStatus(Enum):
    """Completion state of a play log, as persisted in logs.status."""

    COMPLETED = "completed"
    PLAYING = "playing"
    BACKLOG = "backlog"
    WISHLIST = "wishlist"
    ABANDONED = "abandoned"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        """All persisted status strings in declaration order."""
        return tuple(member.value for member in cls)


@dataclass(frozen=True)
class Game:
    """A catalogue entry; id is the external catalogue id."""

    id: int
    title: str
    cover_id: str = ""


@dataclass(frozen=True)
class ExecutableDetails:
    """Maps a launched executable's name to a catalogued game."""

    name: str
    game_id: int


@dataclass
class LogEntry:
    """A persisted play log hydrated with its game."""

    id: int
    created_at: str
    updated_at: str
    date: str
    rating: int
    notes: str
    status: str
    minutes_played: int
    game: Game


@dataclass
class LogEntryInput:
    """Create shape for a log.

    The embedded game is inserted when its id is unknown to the store;
    an already catalogued game keeps its stored title and cover.
    """

    date: str | date
    rating: int
    status: str | LogStatus
    minutes_played: int
    game: Game
    notes: str = ""


@dataclass
class LogEntryUpdate:
    """Update shape for a log. The referenced game cannot change."""

    id: int
    date: str | date
    rating: int
    status: str | LogStatus
    minutes_played: int
    notes: str = ""


@dataclass(frozen=True)
class DashboardStatistics:
    """Aggregates over a closed date interval."""

    total_minutes_played: int = 0
    total_games_played: int = 0
    total_games_completed: int = 0


@dataclass
class UserSettings:
    """Host preferences stored next to the logs."""

    executable_paths: list[str] = field(default_factory=list)
    process_monitoring_enabled: bool = False


def date_param(value: str | date) -> str:
    """Normalize a date argument to the text form stored in logs.date.

    Args:
        value: ISO date string or a date/datetime instance. A datetime
            is reduced to its day.

    Returns:
        The ISO string used for storage and comparison.
    """
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value


def status_param(value: str | LogStatus) -> str:
    """Return the persisted string for a status given as text or enum."""
    if isinstance(value, LogStatus):
        return value.value
    return value


def game_from_row(row: sqlite3.Row) -> Game:
    """Build a Game from a logged_games row."""
    return Game(id=row["id"], title=row["title"] or "", cover_id=row["cover_id"] or "")
