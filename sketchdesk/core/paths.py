from __future__ import annotations

import os
import sys
from pathlib import Path

from sketchdesk.config import APP_IDENTIFIER


def get_app_data_dir(app_identifier: str = APP_IDENTIFIER) -> Path:
    """Return the directory for storing app data (settings.json, logs).

    Preference order:
    1) $SKETCHDESK_DATA_DIR if set (dev / tests / portable installs)
    2) OS user data dir (~/.local/share/<id>, %APPDATA%\\<id>, etc)

    The directory is not created here; writers create it on first save.
    """
    override = os.environ.get("SKETCHDESK_DATA_DIR")
    if override:
        return Path(override).expanduser().resolve()
    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming")
        return (base / app_identifier).resolve()
    if sys.platform == "darwin":
        return (Path.home() / "Library" / "Application Support" / app_identifier).resolve()
    xdg = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg) if xdg else (Path.home() / ".local" / "share")
    return (base / app_identifier).resolve()
