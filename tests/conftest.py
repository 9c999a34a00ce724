# tests/conftest.py
from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

from playlog.core.database import Database, Game, LogEntryInput, initialize_store


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Store file location inside a not-yet-existing directory."""
    return tmp_path / "appdata" / "data.db"


@pytest.fixture
def database(db_path: Path) -> Generator[Database, None, None]:
    """Freshly initialized store on a temp file."""
    db = initialize_store(db_path)
    yield db
    db.close()


@pytest.fixture
def hades() -> Game:
    """Catalogue entry used across log tests."""
    return Game(id=7, title="Hades", cover_id="c1")


def _make_log_input(
    game: Game,
    date: str = "2024-01-01",
    status: str = "playing",
    minutes_played: int = 60,
    rating: int = 8,
    notes: str = "",
) -> LogEntryInput:
    """Helper to create a LogEntryInput with sensible defaults."""
    return LogEntryInput(
        date=date,
        rating=rating,
        notes=notes,
        status=status,
        minutes_played=minutes_played,
        game=game,
    )


@pytest.fixture
def make_log():
    """Factory for LogEntryInput values."""
    return _make_log_input


@pytest.fixture
def seeded_database(database: Database) -> Database:
    """Store with a spread of logs across January 2024.

    Layout (date, status, minutes, game):
        2024-01-01 playing   60  Hades (7)
        2024-01-05 completed 300 Celeste (11)
        2024-01-10 wishlist  0   Outer Wilds (12)
        2024-01-15 backlog   30  Hades (7)
        2024-01-20 abandoned 45  Celeste (11)
        2024-02-02 completed 120 Outer Wilds (12)
    """
    hades = Game(id=7, title="Hades", cover_id="c1")
    celeste = Game(id=11, title="Celeste", cover_id="c11")
    outer_wilds = Game(id=12, title="Outer Wilds", cover_id="c12")

    for log in (
        _make_log_input(hades, "2024-01-01", "playing", 60, rating=8),
        _make_log_input(celeste, "2024-01-05", "completed", 300, rating=10),
        _make_log_input(outer_wilds, "2024-01-10", "wishlist", 0, rating=0),
        _make_log_input(hades, "2024-01-15", "backlog", 30, rating=6),
        _make_log_input(celeste, "2024-01-20", "abandoned", 45, rating=3),
        _make_log_input(outer_wilds, "2024-02-02", "completed", 120, rating=9),
    ):
        database.add_log(log)
    return database
