"""
Locator - pick the gnuplot executable to probe.

An explicit override (GNUPLOT_BINARY, then the settings file) is taken as-is;
otherwise the PATH directories are scanned in order for the first
executable ``gnuplot``. Either way the final candidate must be an
executable regular file.
"""

from __future__ import annotations
import os
import sys
from typing import Mapping, Optional

from ..errors import NotFoundError
from ..obs.logging import get_logger

logger = get_logger("gnuplot_core")

OVERRIDE_ENV = "GNUPLOT_BINARY"
EXECUTABLE_NAME = "gnuplot.exe" if sys.platform == "win32" else "gnuplot"


def is_executable(path: str) -> bool:
    """Check that ``path`` is a regular file the current user may execute."""
    return os.path.isfile(path) and os.access(path, os.X_OK)


def locate_executable(
    env: Optional[Mapping[str, str]] = None,
    override: Optional[str] = None,
) -> str:
    """
    Determine the candidate gnuplot path.

    Args:
        env: Environment to read GNUPLOT_BINARY and PATH from (default: os.environ)
        override: Fallback explicit path, used when GNUPLOT_BINARY is unset

    Returns:
        Absolute path to an executable gnuplot candidate

    Raises:
        NotFoundError: No PATH and no override, or the candidate is not executable
    """
    env = os.environ if env is None else env
    candidate = env.get(OVERRIDE_ENV) or override

    if candidate:
        logger.debug(f"Using explicit gnuplot path {candidate}")
    else:
        search_path = env.get("PATH")
        if search_path is None:
            raise NotFoundError.no_search_path()
        for directory in search_path.split(os.pathsep):
            if not directory:
                continue
            candidate = os.path.join(directory, EXECUTABLE_NAME)
            if is_executable(candidate):
                break

    if not candidate or not is_executable(candidate):
        raise NotFoundError.not_executable(candidate)

    # Popen resolves a bare name against PATH, not the cwd the check used
    candidate = os.path.abspath(candidate)

    logger.debug(f"Located gnuplot candidate {candidate}")
    return candidate
