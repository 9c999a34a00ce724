"""
Configuration - data directory, store file name, logging and locale.
Values come from defaults, then a .env file, then the process environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger("playlog.config")


__all__ = ["Config", "config"]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """
    Central configuration for hosts embedding the play log store.
    Resolves the default store location; never creates directories itself.
    """

    DATA_DIR: Path = Path.home() / ".local" / "share" / "playlog"
    DB_FILENAME: str = "data.db"

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Path | None = None

    LOCALE: str = "en"

    # Read .env on instantiation
    LOAD_ENV: bool = True

    def __post_init__(self):
        """Apply .env and environment overrides after instantiation."""
        env_path = ""
        if self.LOAD_ENV:
            env_path = find_dotenv(usecwd=True)
            if not (env_path and load_dotenv(env_path)):
                env_path = ""

        self._apply_environment()

        if env_path:
            logger.debug(self._message("logs.config.env_loaded", path=env_path))

    def _message(self, key: str, **kwargs) -> str:
        """Render a log message without touching the global catalogue.

        The global catalogue takes its default locale from this module's
        ``config`` instance, which does not exist yet while it is built.
        """
        from playlog.utils.i18n import I18n

        return I18n(self.LOCALE).t(key, **kwargs)

    def _apply_environment(self) -> None:
        """Read PLAYLOG_* variables from the environment."""
        locale = os.getenv("PLAYLOG_LOCALE")
        if locale:
            self.LOCALE = locale

        data_dir = os.getenv("PLAYLOG_DATA_DIR")
        if data_dir:
            self.DATA_DIR = Path(data_dir).expanduser()

        db_filename = os.getenv("PLAYLOG_DB_FILENAME")
        if db_filename:
            self.DB_FILENAME = db_filename

        log_level = os.getenv("PLAYLOG_LOG_LEVEL")
        if log_level:
            if log_level.upper() in _LOG_LEVELS:
                self.LOG_LEVEL = log_level.upper()
            else:
                logger.warning(self._message("logs.config.invalid_level", level=log_level, current=self.LOG_LEVEL))

        log_file = os.getenv("PLAYLOG_LOG_FILE")
        if log_file:
            self.LOG_FILE = Path(log_file).expanduser()

    @property
    def database_path(self) -> Path:
        """Default location of the store file."""
        return self.DATA_DIR / self.DB_FILENAME


# Global instance
config = Config()
