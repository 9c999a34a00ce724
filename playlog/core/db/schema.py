"""Database schema creation.

Applies the idempotent statement batch in schema.sql once per open.
There are no versioned migrations; every statement uses IF NOT EXISTS.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from playlog.utils.i18n import t

logger = logging.getLogger("playlog.database")

__all__ = ["REQUIRED_TABLES", "SCHEMA_PATH", "SchemaMixin"]

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

REQUIRED_TABLES: frozenset[str] = frozenset({"logs", "logged_games", "executable_details", "user_settings"})


class SchemaMixin:
    """Mixin providing schema creation.

    Requires ConnectionBase attributes: conn, db_path.
    """

    def _ensure_schema(self) -> None:
        """Create any missing tables and indexes.

        Raises:
            OSError: If schema.sql cannot be read.
            sqlite3.Error: If the batch fails (corrupt or read-only file).
        """
        try:
            schema_sql = SCHEMA_PATH.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.error(t("logs.db.schema_not_found", path=str(SCHEMA_PATH)))
            raise

        self.conn.executescript(schema_sql)
        self.conn.commit()
        logger.info(t("logs.db.schema_ready", path=str(self.db_path or ":memory:")))

    def _get_table_names(self, cursor: sqlite3.Cursor) -> set[str]:
        """Names of all user tables currently in the store."""
        cursor.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
        return {row[0] for row in cursor.fetchall()}

    def has_schema(self) -> bool:
        """Check that every required table exists.

        Returns:
            True if logs, logged_games, executable_details and user_settings exist.
        """
        with self._cursor() as cur:
            return REQUIRED_TABLES <= self._get_table_names(cur)
