"""
Error hierarchy for gnuplot discovery.

Every failure is fatal at discovery time: nothing here is retried or
degraded. Messages name the remediation a user should take.
"""

from __future__ import annotations
from typing import Optional

GNUPLOT_HOME = "http://www.gnuplot.info"


class GnuplotError(Exception):
    """Base class for every gnuplot_core failure."""
    error_code = "gnuplot_error"

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ConfigError(GnuplotError):
    """Raised when the settings file cannot be parsed."""
    error_code = "config_error"


class NotFoundError(GnuplotError):
    """Raised when no executable gnuplot can be located."""
    error_code = "not_found"

    @classmethod
    def no_search_path(cls) -> "NotFoundError":
        return cls(
            "gnuplot_core: no PATH search variable found, and no GNUPLOT_BINARY "
            "environment variable found either."
        )

    @classmethod
    def not_executable(cls, path: Optional[str]) -> "NotFoundError":
        return cls(
            "gnuplot_core: no executable gnuplot found! If you have gnuplot, "
            "you can put its exact location in your GNUPLOT_BINARY environment "
            "variable or make sure your PATH contains it. If you do not have "
            f"gnuplot, install it from your package manager or from {GNUPLOT_HOME}.",
            path=path,
        )


class SpawnError(GnuplotError):
    """Raised when the gnuplot subprocess cannot be started."""
    error_code = "spawn_failed"

    @classmethod
    def for_path(cls, path: str, reason: object) -> "SpawnError":
        return cls(f"gnuplot_core: couldn't start {path}: {reason}", path=path)


class IdentityError(GnuplotError):
    """Raised when the probed executable does not identify itself as gnuplot."""
    error_code = "not_gnuplot"

    @classmethod
    def for_path(cls, path: Optional[str]) -> "IdentityError":
        return cls(
            f"gnuplot_core: the executable file {path} appears not to be gnuplot! "
            "You can remove it or set your GNUPLOT_BINARY variable to an actual gnuplot.",
            path=path,
        )


class ParseError(GnuplotError):
    """Raised when no version number can be read from the transcript."""
    error_code = "unparsed_version"

    @classmethod
    def for_path(cls, path: Optional[str]) -> "ParseError":
        return cls(
            f"gnuplot_core: the executable file {path} claims to be gnuplot, but "
            "no version number could be parsed from its output.",
            path=path,
        )


class VersionTooLowError(GnuplotError):
    """Raised by the version gate when gnuplot is older than required."""
    error_code = "version_too_low"

    def __init__(self, found: str, required: str, path: Optional[str] = None):
        super().__init__(
            f"gnuplot_core: found gnuplot version {found}, but you requested {required}. "
            f"You should upgrade gnuplot, either from your package manager or from {GNUPLOT_HOME}.",
            path=path,
        )
        self.found = found
        self.required = required


__all__ = [
    'GnuplotError',
    'ConfigError',
    'NotFoundError',
    'SpawnError',
    'IdentityError',
    'ParseError',
    'VersionTooLowError',
]
