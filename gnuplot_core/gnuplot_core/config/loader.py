from __future__ import annotations
import logging
import os
from typing import Any, Dict, Optional
import yaml  # type: ignore
from ..errors import ConfigError
from ..utils.paths import settings_path

DEFAULT_SETTINGS: Dict[str, Any] = {
    # Explicit gnuplot path; GNUPLOT_BINARY in the environment wins over this
    "binary": None,
    "log_level": "INFO",
}


def load_settings(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load settings from <config>/gnuplot.yml if present, else return DEFAULT_SETTINGS.

    Unknown keys are dropped. A file that is not valid YAML, or whose top level
    is not a mapping, raises ConfigError.
    """
    path = path or settings_path()
    settings = dict(DEFAULT_SETTINGS)
    if not os.path.exists(path):
        return settings
    try:
        with open(path, "r", encoding="utf-8") as f:
            doc = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"gnuplot_core: cannot parse settings file {path}: {e}", path=path) from e
    if not isinstance(doc, dict):
        raise ConfigError(f"gnuplot_core: settings file {path} must contain a mapping", path=path)
    settings.update({k: v for k, v in doc.items() if k in DEFAULT_SETTINGS})
    level = str(settings["log_level"]).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"gnuplot_core: unknown log_level {settings['log_level']!r} in {path}", path=path)
    settings["log_level"] = level
    if settings["binary"] is not None:
        settings["binary"] = os.path.expanduser(str(settings["binary"]))
    return settings
