"""Store handle: connection setup, locking and lifecycle.

One SQLite connection is owned by the handle and guarded by a lock.
Every query mixin runs its statements inside ``_cursor()``, which holds
the lock for the whole operation, commits on success and rolls back on
failure.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from playlog.exceptions import QueryExecutionError, StorageInitError
from playlog.utils.i18n import t

logger = logging.getLogger("playlog.database")

__all__ = ["ConnectionBase", "MEMORY_LOCATION"]

MEMORY_LOCATION = ":memory:"


class ConnectionBase:
    """Base class providing the locked SQLite connection.

    Enables foreign keys and WAL mode, then calls _ensure_schema()
    which is provided by SchemaMixin via multiple inheritance.
    """

    conn: sqlite3.Connection
    db_path: Path | None

    def __init__(self, location: str | Path) -> None:
        """Open (or create) the store and apply the schema.

        Args:
            location: Path to the SQLite file, or ":memory:".

        Raises:
            StorageInitError: If the directory, file or schema cannot be set up.
        """
        self._lock = threading.Lock()
        self.db_path = None if str(location) == MEMORY_LOCATION else Path(location).expanduser()
        target = str(self.db_path) if self.db_path else MEMORY_LOCATION

        logger.debug(t("logs.db.opening", path=target))

        if self.db_path is not None:
            try:
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                logger.error(t("logs.db.init_failed", path=target, error=e))
                raise StorageInitError(f"Cannot create directory {self.db_path.parent}: {e}") from e

        try:
            self.conn = sqlite3.connect(target, check_same_thread=False)
        except sqlite3.Error as e:
            logger.error(t("logs.db.init_failed", path=target, error=e))
            raise StorageInitError(f"Cannot open store at {target}: {e}") from e

        try:
            self.conn.row_factory = sqlite3.Row
            self.conn.execute("PRAGMA foreign_keys = ON")
            if self.db_path is not None:
                self.conn.execute("PRAGMA journal_mode = WAL")
            self._ensure_schema()
        except (sqlite3.Error, OSError) as e:
            self.conn.close()
            logger.error(t("logs.db.init_failed", path=target, error=e))
            raise StorageInitError(f"Cannot apply schema to {target}: {e}") from e

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        """Hold the store lock for one all-or-nothing operation.

        Raises:
            QueryExecutionError: If SQLite fails; the transaction is rolled back.
        """
        with self._lock:
            try:
                cur = self.conn.cursor()
            except sqlite3.ProgrammingError as e:
                raise QueryExecutionError(f"Store is closed: {e}") from e

            try:
                yield cur
                self.conn.commit()
            except sqlite3.Error as e:
                self.conn.rollback()
                logger.error(t("logs.db.query_failed", error=e))
                raise QueryExecutionError(str(e)) from e
            except Exception:
                self.conn.rollback()
                raise
            finally:
                cur.close()

    def close(self) -> None:
        """Close the connection. Waits for a running operation to finish."""
        with self._lock:
            self.conn.close()
        logger.debug(t("logs.db.closed", path=str(self.db_path or MEMORY_LOCATION)))

    def __enter__(self) -> ConnectionBase:
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()
