"""
gnuplot_core - find and verify the gnuplot executable.

Usage:
    import gnuplot_core

    gp = gnuplot_core.get_discovery()
    gnuplot_core.require_version(gp, "5.0")
    subprocess.run([gp.executable_path, "plot.gp"])

``get_discovery()`` runs discovery at most once per process. Code that
wants to hold its own result (or test against a fake gnuplot) can call
``discover()`` directly.
"""

from typing import Any, Dict, Optional

from .errors import (
    GnuplotError,
    ConfigError,
    NotFoundError,
    SpawnError,
    IdentityError,
    ParseError,
    VersionTooLowError,
)
from .discovery import (
    DiscoveryResult,
    Terminal,
    RECOMMENDED_VERSION,
    discover,
    meets_recommended,
    require_version,
)
from .config import DEFAULT_SETTINGS, load_settings
from .obs.logging import set_level

__version__ = "1.1.0"

_discovery_cache: Optional[DiscoveryResult] = None


def get_discovery(settings: Optional[Dict[str, Any]] = None) -> DiscoveryResult:
    """
    Get the process-wide gnuplot discovery result.

    Discovery runs on the first call, using the environment and ``settings``
    (loaded from the settings file when omitted; missing keys take their
    defaults). The result is cached after that. Failures are not cached.

    Raises:
        GnuplotError: If gnuplot cannot be found or verified
    """
    global _discovery_cache

    if _discovery_cache is not None:
        return _discovery_cache

    if settings is None:
        settings = load_settings()
    settings = {**DEFAULT_SETTINGS, **settings}
    set_level(settings["log_level"])
    _discovery_cache = discover(settings=settings)
    return _discovery_cache


def reset_discovery_cache():
    """Reset discovery cache (useful for testing)."""
    global _discovery_cache
    _discovery_cache = None


__all__ = [
    'GnuplotError',
    'ConfigError',
    'NotFoundError',
    'SpawnError',
    'IdentityError',
    'ParseError',
    'VersionTooLowError',
    'DiscoveryResult',
    'Terminal',
    'RECOMMENDED_VERSION',
    'discover',
    'get_discovery',
    'reset_discovery_cache',
    'meets_recommended',
    'require_version',
    '__version__',
]
