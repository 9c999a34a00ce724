"""Logged game lookups and the first-writer-wins game upsert."""

from __future__ import annotations

import logging
import sqlite3

from playlog.core.db.models import Game, game_from_row
from playlog.exceptions import NotFoundError
from playlog.utils.i18n import t

logger = logging.getLogger("playlog.database")

__all__ = ["GameQueryMixin"]


class GameQueryMixin:
    """Mixin providing logged game operations.

    Requires ConnectionBase: _cursor().
    """

    def get_logged_game(self, game_id: int) -> Game:
        """Get a catalogued game by its catalogue id.

        Args:
            game_id: External catalogue id.

        Returns:
            The stored game.

        Raises:
            NotFoundError: If no game with that id has been logged.
        """
        with self._cursor() as cur:
            row = cur.execute("SELECT id, title, cover_id FROM logged_games WHERE id = ?", (game_id,)).fetchone()

        if row is None:
            raise NotFoundError(f"No logged game with id {game_id}")
        return game_from_row(row)

    def get_logged_game_count(self) -> int:
        """Get the number of catalogued games."""
        with self._cursor() as cur:
            return cur.execute("SELECT COUNT(*) FROM logged_games").fetchone()[0]

    @staticmethod
    def _insert_game_if_absent(cur: sqlite3.Cursor, game: Game) -> bool:
        """Insert a game unless its id is already catalogued.

        An existing row is never modified, whatever title or cover the
        incoming game carries. Runs inside the caller's transaction.

        Args:
            cur: Cursor of the running operation.
            game: Game payload embedded in a new log.

        Returns:
            True if a new row was inserted.
        """
        cur.execute(
            """
            INSERT INTO logged_games (id, title, cover_id)
            VALUES (?, ?, ?)
            ON CONFLICT(id) DO NOTHING
            """,
            (game.id, game.title, game.cover_id or ""),
        )
        inserted = cur.rowcount > 0
        if inserted:
            logger.info(t("logs.db.game_inserted", game_id=game.id, title=game.title))
        else:
            logger.debug(t("logs.db.game_exists", game_id=game.id))
        return inserted
