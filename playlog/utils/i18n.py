"""
Message catalogue lookup.

Loads catalogue files:
1. Shared files from resources/i18n/*.json (language-agnostic: log messages)
2. Locale-specific files from resources/i18n/{locale}/*.json (validation messages)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

__all__ = ["I18n", "get_language", "init_i18n", "t"]

logger = logging.getLogger("playlog.i18n")


class I18n:
    """Catalogue of dot-keyed message templates for one locale.

    Shared files are loaded first, English is merged on top as the fallback,
    and a non-English locale is merged over that.
    """

    def __init__(self, locale: str = "en", i18n_root: Path | None = None) -> None:
        """Initialize I18n with a specific locale code.

        Args:
            locale: The locale code used to find the corresponding
                directory in resources/i18n/.
            i18n_root: Optional catalogue root, defaults to the bundled one.
        """
        self.locale = locale
        self.translations: dict[str, Any] = {}

        if i18n_root is None:
            from playlog.utils.paths import get_resources_dir

            i18n_root = get_resources_dir() / "i18n"
        self.i18n_root = i18n_root

        self._load_translations()

    def _load_translations(self) -> None:
        shared_data = self._load_json_directory(self.i18n_root)
        fallback = self._deep_merge(shared_data, self._load_json_directory(self.i18n_root / "en"))

        if self.locale != "en":
            self.translations = self._deep_merge(fallback, self._load_json_directory(self.i18n_root / self.locale))
        else:
            self.translations = fallback

    @staticmethod
    def _load_json_directory(directory: Path) -> dict[str, Any]:
        """Loads and deep-merges all JSON files from a directory.

        Args:
            directory: Path to scan for ``*.json`` files.

        Returns:
            Merged dictionary of all JSON files found.
        """
        merged: dict[str, Any] = {}
        if not directory.exists():
            return merged
        for file_path in sorted(directory.glob("*.json")):
            try:
                with open(file_path, "r", encoding="utf-8") as f:
                    merged = I18n._deep_merge(merged, json.load(f))
            except (OSError, json.JSONDecodeError) as e:
                logger.error("Error loading i18n file %s: %s", file_path.name, e)
        return merged

    @staticmethod
    def _deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
        result = base.copy()
        for key, value in update.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = I18n._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def t(self, key: str, **kwargs: Any) -> str:
        """Retrieve a message by dot-notation key.

        Args:
            key: Dot-separated key path (e.g. 'logs.db.schema_ready').
            **kwargs: Format arguments for string interpolation.

        Returns:
            Formatted message, or '[key]' if not found.
        """
        value: Any = self.translations
        for k in key.split("."):
            if isinstance(value, dict):
                value = value.get(k)
            else:
                value = None
                break

        if not isinstance(value, str):
            return f"[{key}]"

        if kwargs:
            try:
                return value.format(**kwargs)
            except (ValueError, KeyError, IndexError):
                return value

        return value


_i18n_instance: I18n | None = None


def init_i18n(locale: str | None = None) -> I18n:
    """Initialize the global catalogue instance.

    Args:
        locale: The locale code to use, defaults to ``config.LOCALE``.

    Returns:
        The initialized I18n instance.
    """
    global _i18n_instance
    if locale is None:
        from playlog.config import config

        locale = config.LOCALE
    _i18n_instance = I18n(locale)
    return _i18n_instance


def get_language() -> str:
    """Return the locale code of the global catalogue instance."""
    if _i18n_instance is None:
        init_i18n()
    return _i18n_instance.locale


def t(key: str, **kwargs: Any) -> str:
    """Retrieve a message using the global catalogue instance.

    Args:
        key: Dot-separated key path.
        **kwargs: Format arguments for string interpolation.

    Returns:
        Formatted message, or '[key]' if not found.
    """
    if _i18n_instance is None:
        init_i18n()
    return _i18n_instance.t(key, **kwargs)
