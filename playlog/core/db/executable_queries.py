"""Executable to game mappings.

Mappings are append-only. An executable mapped more than once resolves
to its most recent mapping.
"""

from __future__ import annotations

import logging

from playlog.core.db.models import ExecutableDetails
from playlog.exceptions import NotFoundError
from playlog.utils.i18n import t

logger = logging.getLogger("playlog.database")

__all__ = ["ExecutableQueryMixin"]


class ExecutableQueryMixin:
    """Mixin providing executable mapping operations.

    Requires ConnectionBase: _cursor().
    """

    def add_executable_details(self, details: ExecutableDetails) -> int:
        """Map an executable name to a catalogued game.

        Args:
            details: Executable name and game id. The game must already
                be catalogued.

        Returns:
            Row id of the new mapping.

        Raises:
            QueryExecutionError: If the game id is not catalogued.
        """
        with self._cursor() as cur:
            cur.execute(
                "INSERT INTO executable_details (executable_name, game_id) VALUES (?, ?)",
                (details.name, details.game_id),
            )
            record_id = cur.lastrowid

        logger.info(t("logs.db.executable_added", name=details.name, game_id=details.game_id))
        return record_id

    def get_executable_details(self, executable_name: str) -> ExecutableDetails:
        """Resolve an executable name to its game.

        Args:
            executable_name: Name of the launched executable, e.g. "game.exe".

        Returns:
            The newest mapping for that name.

        Raises:
            NotFoundError: If the executable was never mapped.
        """
        with self._cursor() as cur:
            row = cur.execute(
                """
                SELECT executable_name, game_id FROM executable_details
                WHERE executable_name = ?
                ORDER BY rowid DESC
                LIMIT 1
                """,
                (executable_name,),
            ).fetchone()

        if row is None:
            raise NotFoundError(f"No game mapped to executable {executable_name!r}")
        return ExecutableDetails(name=row["executable_name"], game_id=row["game_id"])
