"""
core/paths.py — PASSMETER
==========================
Single source of truth for every path the application touches.

  - BASE_DIR / config_path()  → files shipped with the app (read-only)
  - get_user_data_dir()       → writable per-user data
      Windows : %APPDATA%/PASSMETER/
      Linux   : ~/.local/share/PASSMETER/
      Mac     : ~/.local/share/PASSMETER/

PASSMETER_DATA_DIR overrides the user data directory (tests, containers).
"""

import os
import sys
from pathlib import Path

from version import APP_NAME


# project root (core/paths.py → one level up)
BASE_DIR = Path(__file__).resolve().parent.parent


def config_path(filename: str = "") -> Path:
    """Config directory, or a file inside it."""
    p = BASE_DIR / "config"
    return p / filename if filename else p


def get_user_data_dir() -> Path:
    """
    Return the writable user data directory, creating it if needed.
    """
    override = os.getenv("PASSMETER_DATA_DIR")
    if override:
        base_dir = Path(override)
    else:
        if sys.platform == "win32":
            appdata = os.getenv("APPDATA") or str(Path.home() / "AppData" / "Roaming")
            base = Path(appdata)
        else:
            base = Path.home() / ".local" / "share"
        base_dir = base / APP_NAME

    base_dir.mkdir(parents=True, exist_ok=True)
    return base_dir


def logs_path(filename: str = "") -> Path:
    """Logs directory inside the user data directory."""
    p = get_user_data_dir() / "logs"
    p.mkdir(parents=True, exist_ok=True)
    return p / filename if filename else p
