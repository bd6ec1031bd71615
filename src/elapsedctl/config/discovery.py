"""Config file discovery.

``ELAPSEDCTL_CONFIG`` names the file outright; otherwise the nearest
elapsedctl.toml in the working directory or one of its ancestors wins.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "elapsedctl.toml"
CONFIG_ENV_VAR = "ELAPSEDCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None.

    An ``ELAPSEDCTL_CONFIG`` pointing at a missing file disables the walk-up.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
