"""Locate tripview.toml.

An explicit ``TRIPVIEW_CONFIG`` path is used as-is. Otherwise the nearest
tripview.toml in the starting directory or any of its ancestors wins. The
``--config`` flag bypasses discovery entirely.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "tripview.toml"
CONFIG_ENV_VAR = "TRIPVIEW_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    A ``TRIPVIEW_CONFIG`` that names a missing file yields None rather than
    falling back to discovery.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    return next(
        (d / CONFIG_FILENAME for d in (here, *here.parents) if (d / CONFIG_FILENAME).is_file()),
        None,
    )
