"""Logging setup for hosts embedding the play log store.

Store modules log through child loggers of "playlog" ("playlog.database",
"playlog.config", ...). The library never configures handlers on import;
a host calls setup_logging() once, usually without arguments so the
PLAYLOG_LOG_LEVEL and PLAYLOG_LOG_FILE settings apply.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from playlog.config import config

__all__ = ["logger", "setup_logging"]

logger = logging.getLogger("playlog")

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        # Unknown names come back as "Level X"
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def setup_logging(
    level: int | str | None = None,
    log_file: Path | None = None,
) -> None:
    """Configure the package logger.

    Calling again only changes the level; handlers are attached once.

    Args:
        level: Level number or name. Defaults to ``config.LOG_LEVEL``.
        log_file: Extra file destination. Defaults to ``config.LOG_FILE``;
            no file handler when both are unset.
    """
    level = _resolve_level(level)
    logger.setLevel(level)

    if logger.handlers:
        for handler in logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(level)
        return

    formatter = logging.Formatter(fmt=_FORMAT, datefmt="%H:%M:%S")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = log_file or config.LOG_FILE
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
