"""
Discovery - find and verify the gnuplot executable.

This module provides:
- Schema (what we report)
- Locator (where gnuplot is)
- Prober (what gnuplot says)
- Parser (what that means)
- Engine (orchestration + version gate)
"""

from .schema import DiscoveryResult, Terminal
from .locator import OVERRIDE_ENV, locate_executable
from .prober import probe
from .parser import ParsedTranscript, ScanState, parse_transcript
from .engine import (
    RECOMMENDED_VERSION,
    discover,
    meets_recommended,
    parse_version_string,
    require_version,
    version_at_least,
)

__all__ = [
    'DiscoveryResult',
    'Terminal',
    'OVERRIDE_ENV',
    'locate_executable',
    'probe',
    'ParsedTranscript',
    'ScanState',
    'parse_transcript',
    'RECOMMENDED_VERSION',
    'discover',
    'meets_recommended',
    'parse_version_string',
    'require_version',
    'version_at_least',
]
