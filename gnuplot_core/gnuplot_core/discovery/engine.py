"""
Discovery Engine - locate, probe and verify gnuplot in one pass.

Usage:
    result = discover()
    require_version(result, "5.0")
    print(result.executable_path, result.version, result.terms["png"])
"""

from __future__ import annotations
import time
from typing import Any, Dict, Mapping, Optional

from ..errors import GnuplotError, VersionTooLowError
from ..obs.logging import get_logger
from .locator import locate_executable
from .parser import parse_transcript
from .prober import probe
from .schema import DiscoveryResult, parse_version_string

logger = get_logger("gnuplot_core")

# Oldest gnuplot this package is known to work well with
RECOMMENDED_VERSION = "4.6"


def discover(
    env: Optional[Mapping[str, str]] = None,
    settings: Optional[Dict[str, Any]] = None,
) -> DiscoveryResult:
    """
    Find gnuplot, run it, and return what it reports about itself.

    Args:
        env: Environment for GNUPLOT_BINARY / PATH lookup (default: os.environ)
        settings: Loaded settings; only ``binary`` is consulted here

    Returns:
        Immutable DiscoveryResult

    Raises:
        NotFoundError, SpawnError, IdentityError, ParseError
    """
    settings = settings or {}
    started = time.monotonic()

    try:
        executable = locate_executable(env=env, override=settings.get("binary"))
        transcript = probe(executable)
        parsed = parse_transcript(transcript, executable)
    except GnuplotError as e:
        logger.error(str(e), extra={"executable": e.path, "error_code": e.error_code})
        raise

    result = DiscoveryResult(
        executable_path=executable,
        version=parsed.version,
        patch_level=parsed.patch_level,
        terminals=tuple(parsed.terminals),
    )
    logger.info(
        "gnuplot discovered",
        extra={
            "executable": executable,
            "version": result.version,
            "patch_level": result.patch_level,
            "terminal_count": len(result.terminals),
            "duration_ms": round((time.monotonic() - started) * 1000, 1),
        },
    )
    return result


def version_at_least(found: str, required: str) -> bool:
    return parse_version_string(found) >= parse_version_string(required)


def require_version(result: DiscoveryResult, minimum: str) -> DiscoveryResult:
    """
    Gate on a minimum gnuplot version.

    Returns the result unchanged when ``result.version`` is at least
    ``minimum``; raises VersionTooLowError otherwise.
    """
    if not version_at_least(result.version, minimum):
        raise VersionTooLowError(result.version, str(minimum), path=result.executable_path)
    return result


def meets_recommended(result: DiscoveryResult) -> bool:
    """Check the discovered gnuplot against RECOMMENDED_VERSION."""
    return version_at_least(result.version, RECOMMENDED_VERSION)
