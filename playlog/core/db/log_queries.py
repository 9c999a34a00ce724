"""Play log CRUD and listing queries.

Handles create (with game upsert), read by id, filtered/sorted listings,
update and idempotent delete. Every read joins the log with its game.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterable

from playlog.core.db.models import (
    Game,
    LogEntry,
    LogEntryInput,
    LogEntryUpdate,
    LogStatus,
    status_param,
)
from playlog.core.db.query_builder import build_log_select, build_order_by, build_status_filter
from playlog.core.db.validation import (
    normalize_log_date,
    raise_for_errors,
    validate_log_input,
    validate_log_update,
)
from playlog.exceptions import DataIntegrityError, NotFoundError
from playlog.utils.i18n import t

logger = logging.getLogger("playlog.database")

__all__ = ["LogQueryMixin"]

_TIMESTAMP_SQL = "strftime('%Y-%m-%dT%H:%M:%fZ', 'now')"


class LogQueryMixin:
    """Mixin providing play log operations.

    Requires ConnectionBase: _cursor().
    Requires GameQueryMixin: _insert_game_if_absent().
    """

    def get_recent_logs(self, limit: int, status_filter: Iterable[str | LogStatus] | None = ()) -> list[LogEntry]:
        """Get the most recent logs, newest date first.

        Args:
            limit: Maximum number of logs. Zero or less returns no logs.
            status_filter: Allowed statuses; empty means all statuses.

        Returns:
            Up to ``limit`` logs ordered by date descending.

        Raises:
            InvalidQueryError: If the filter holds an unknown status.
        """
        where, params = build_status_filter(status_filter)
        if limit <= 0:
            return []

        query = build_log_select(where, "ORDER BY logs.date DESC, logs.id DESC", limit=True)
        with self._cursor() as cur:
            rows = cur.execute(query, (*params, limit)).fetchall()
        return [self._log_from_row(row) for row in rows]

    def get_logs(
        self,
        sort_column: str,
        sort_direction: str,
        status_filter: Iterable[str | LogStatus] | None = (),
    ) -> list[LogEntry]:
        """Get all logs sorted by a caller-chosen column.

        Sort input is validated before the store is touched.

        Args:
            sort_column: Sort key, e.g. "date", "rating" or "title".
            sort_direction: "ASC" or "DESC".
            status_filter: Allowed statuses; empty means all statuses.

        Returns:
            All matching logs in the requested order.

        Raises:
            InvalidQueryError: If the sort column, direction or a status is not allowed.
        """
        order_by = build_order_by(sort_column, sort_direction)
        where, params = build_status_filter(status_filter)
        query = build_log_select(where, order_by)

        with self._cursor() as cur:
            rows = cur.execute(query, params).fetchall()
        return [self._log_from_row(row) for row in rows]

    def get_log_by_id(self, log_id: int) -> LogEntry:
        """Get a single log with its game.

        Args:
            log_id: Log row id.

        Returns:
            The log.

        Raises:
            NotFoundError: If no log has that id.
            DataIntegrityError: If the log's game row is missing.
        """
        with self._cursor() as cur:
            row = cur.execute(build_log_select("logs.id = ?"), (log_id,)).fetchone()

        if row is None:
            raise NotFoundError(f"No log with id {log_id}")
        return self._log_from_row(row)

    def add_log(self, log_input: LogEntryInput) -> int:
        """Create a log, cataloguing its game first if needed.

        The embedded game is only inserted when its id is unknown. A game
        that is already catalogued keeps its stored title and cover.

        Args:
            log_input: The new log and its game.

        Returns:
            The new log id.

        Raises:
            LogValidationError: If a field is invalid.
        """
        raise_for_errors(validate_log_input(log_input))

        with self._cursor() as cur:
            self._insert_game_if_absent(cur, log_input.game)
            cur.execute(
                """
                INSERT INTO logs (game_id, date, rating, notes, status, minutes_played)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    log_input.game.id,
                    normalize_log_date(log_input.date),
                    log_input.rating,
                    log_input.notes or "",
                    status_param(log_input.status),
                    log_input.minutes_played,
                ),
            )
            log_id = cur.lastrowid

        logger.info(t("logs.db.log_added", log_id=log_id, game_id=log_input.game.id))
        return log_id

    def update_log(self, update: LogEntryUpdate) -> int:
        """Overwrite the editable fields of a log and refresh updated_at.

        Args:
            update: Log id and new field values.

        Returns:
            The updated log id.

        Raises:
            LogValidationError: If a field is invalid.
            NotFoundError: If no log has that id.
        """
        raise_for_errors(validate_log_update(update))

        with self._cursor() as cur:
            cur.execute(
                f"""
                UPDATE logs
                SET date = ?, rating = ?, notes = ?, status = ?, minutes_played = ?,
                    updated_at = {_TIMESTAMP_SQL}
                WHERE id = ?
                """,
                (
                    normalize_log_date(update.date),
                    update.rating,
                    update.notes or "",
                    status_param(update.status),
                    update.minutes_played,
                    update.id,
                ),
            )
            if cur.rowcount == 0:
                raise NotFoundError(f"No log with id {update.id}")

        logger.info(t("logs.db.log_updated", log_id=update.id))
        return update.id

    def delete_log(self, log_id: int) -> int:
        """Delete a log. Deleting an unknown id is a no-op.

        The log's game stays catalogued.

        Args:
            log_id: Log row id.

        Returns:
            The same id.
        """
        with self._cursor() as cur:
            cur.execute("DELETE FROM logs WHERE id = ?", (log_id,))
            removed = cur.rowcount

        logger.info(t("logs.db.log_deleted", log_id=log_id, rows=removed))
        return log_id

    def get_log_count(self) -> int:
        """Get total number of logs."""
        with self._cursor() as cur:
            return cur.execute("SELECT COUNT(*) FROM logs").fetchone()[0]

    @staticmethod
    def _log_from_row(row: sqlite3.Row) -> LogEntry:
        """Hydrate a joined row from build_log_select().

        Raises:
            DataIntegrityError: If the game side of the join is empty.
        """
        if row["game_ref"] is None:
            logger.error(t("logs.db.orphan_log", log_id=row["id"], game_id=row["game_id"]))
            raise DataIntegrityError(f"Log {row['id']} references missing game {row['game_id']}")

        return LogEntry(
            id=row["id"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
            date=row["date"],
            rating=row["rating"],
            notes=row["notes"] or "",
            status=row["status"],
            minutes_played=row["minutes_played"],
            game=Game(id=row["game_ref"], title=row["game_title"] or "", cover_id=row["game_cover_id"] or ""),
        )
