"""Smoke tests – verify all modules are importable and free of syntax errors.

This is an infrastructure test (not a unit test), so it lives in the tests
root rather than under ``tests/unit/``.
"""

from __future__ import annotations

import importlib

import pytest

MODULES: list[str] = [
    "playlog",
    "playlog.config",
    "playlog.exceptions",
    "playlog.version",
    "playlog.core.database",
    "playlog.core.logging",
    "playlog.core.db",
    "playlog.core.db.connection",
    "playlog.core.db.executable_queries",
    "playlog.core.db.game_queries",
    "playlog.core.db.log_queries",
    "playlog.core.db.models",
    "playlog.core.db.query_builder",
    "playlog.core.db.schema",
    "playlog.core.db.settings_queries",
    "playlog.core.db.statistics_queries",
    "playlog.core.db.validation",
    "playlog.utils.i18n",
    "playlog.utils.paths",
]


@pytest.mark.parametrize("module_path", MODULES)
def test_import_modules(module_path: str) -> None:
    """Module must be importable without errors."""
    importlib.import_module(module_path)


def test_schema_file_is_bundled() -> None:
    """schema.sql must ship next to the schema module."""
    from playlog.core.db.schema import SCHEMA_PATH

    assert SCHEMA_PATH.is_file()


def test_log_catalogue_is_bundled() -> None:
    """Every log key used by the store must resolve in the catalogue."""
    from playlog.utils.i18n import I18n

    i18n = I18n("en")
    for key in (
        "logs.db.opening",
        "logs.db.schema_ready",
        "logs.db.init_failed",
        "logs.db.query_failed",
        "logs.db.game_inserted",
        "logs.db.game_exists",
        "logs.db.log_added",
        "logs.db.log_updated",
        "logs.db.log_deleted",
        "logs.db.orphan_log",
        "logs.db.executable_added",
        "logs.db.settings_saved",
        "logs.db.closed",
        "logs.config.env_loaded",
        "logs.config.invalid_level",
    ):
        assert not i18n.t(key).startswith("["), key
