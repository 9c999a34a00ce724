"""Play Log - local play-session store for a personal game tracker."""

from __future__ import annotations

from playlog.version import __version__

__all__ = ["__version__"]
