"""Path resolution for bundled package resources.

Resources (i18n catalogues) ship inside the playlog package, both when
running from a checkout and when installed via pip.
"""

from __future__ import annotations

import sys
from pathlib import Path

__all__ = ["get_resources_dir"]

_resources_dir: Path | None = None


def get_resources_dir() -> Path:
    """Get the path to the resources directory.

    Checks, in order:
    1. playlog/resources/ relative to this file (checkout + pip install)
    2. sys.prefix/resources (frozen or relocated installs)

    Returns:
        Path to the resources directory.

    Raises:
        FileNotFoundError: If resources directory cannot be found.
    """
    global _resources_dir
    if _resources_dir is not None:
        return _resources_dir

    # paths.py is at playlog/utils/paths.py → parent.parent = playlog/
    candidate = Path(__file__).resolve().parent.parent / "resources"
    if candidate.is_dir():
        _resources_dir = candidate
        return _resources_dir

    candidate = Path(sys.prefix) / "resources"
    if candidate.is_dir():
        _resources_dir = candidate
        return _resources_dir

    raise FileNotFoundError(
        "Could not locate resources directory. Searched: playlog/resources/, sys.prefix/resources/"
    )
