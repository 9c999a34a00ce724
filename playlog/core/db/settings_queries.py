"""User settings persistence (single row)."""

from __future__ import annotations

import logging

from playlog.core.db.models import UserSettings
from playlog.utils.i18n import t

logger = logging.getLogger("playlog.database")

__all__ = ["PATH_SEPARATOR", "SettingsMixin"]

PATH_SEPARATOR = ";"


class SettingsMixin:
    """Mixin providing user settings operations.

    Requires ConnectionBase: _cursor().
    """

    def get_user_settings(self) -> UserSettings:
        """Get the stored settings, or defaults if none were saved yet."""
        with self._cursor() as cur:
            row = cur.execute(
                "SELECT executable_paths, process_monitoring_enabled FROM user_settings WHERE id = 1"
            ).fetchone()

        if row is None:
            return UserSettings()

        paths = [path for path in (row["executable_paths"] or "").split(PATH_SEPARATOR) if path]
        return UserSettings(executable_paths=paths, process_monitoring_enabled=bool(row["process_monitoring_enabled"]))

    def save_user_settings(self, settings: UserSettings) -> None:
        """Insert or overwrite the settings row.

        Args:
            settings: New settings. Empty paths are dropped.
        """
        paths = [str(path) for path in settings.executable_paths if str(path)]
        with self._cursor() as cur:
            cur.execute(
                """
                INSERT INTO user_settings (id, executable_paths, process_monitoring_enabled)
                VALUES (1, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    executable_paths = excluded.executable_paths,
                    process_monitoring_enabled = excluded.process_monitoring_enabled
                """,
                (PATH_SEPARATOR.join(paths), int(settings.process_monitoring_enabled)),
            )

        logger.info(t("logs.db.settings_saved", count=len(paths)))
