from __future__ import annotations
import os
from pathlib import Path

"""
Config directory resolver with env override.
Priority:
1) Explicit env override: GNUPLOT_CORE_CONFIG_DIR
2) If running as root (uid==0): /etc/gnuplot-core
3) XDG (user scope): $XDG_CONFIG_HOME/gnuplot-core or ~/.config/gnuplot-core
"""

APP_DIR_NAME = "gnuplot-core"
SETTINGS_FILE = "gnuplot.yml"


def _is_root() -> bool:
    try:
        return os.geteuid() == 0
    except AttributeError:
        # No geteuid on Windows
        return False


def config_dir() -> str:
    if os.environ.get("GNUPLOT_CORE_CONFIG_DIR"):
        return os.environ["GNUPLOT_CORE_CONFIG_DIR"]
    if _is_root():
        return os.path.join("/etc", APP_DIR_NAME)
    xdg = os.environ.get("XDG_CONFIG_HOME") or os.path.join(Path.home(), ".config")
    return os.path.join(xdg, APP_DIR_NAME)


def settings_path() -> str:
    return os.path.join(config_dir(), SETTINGS_FILE)
