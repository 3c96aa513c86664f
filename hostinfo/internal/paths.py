import os
from pathlib import Path

from hostinfo.internal.constants import APP_NAME, HOME_ENV


# ---------------------------------------------------------------------
# Base directories
# ---------------------------------------------------------------------

def get_app_data_dir() -> Path:
    """
    Returns the application data directory.

    - $HOSTINFO_HOME when set
    - Windows: %APPDATA%\\hostinfo
    - Linux/macOS: ~/.hostinfo
    """
    override = os.environ.get(HOME_ENV)
    if override:
        path = Path(override)
    elif os.name == "nt":  # Windows
        base = os.environ.get("APPDATA", str(Path.home()))
        path = Path(base) / APP_NAME
    else:  # Linux / macOS
        path = Path.home() / f".{APP_NAME}"

    path.mkdir(parents=True, exist_ok=True)
    return path


# ---------------------------------------------------------------------
# Logs
# ---------------------------------------------------------------------

def get_log_dir() -> Path:
    path = get_app_data_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_log_file() -> Path:
    """
    Default JSON log file used by the CLI.
    """
    return get_log_dir() / f"{APP_NAME}.log.json"
