"""
Parser - read identity, version and terminal list out of a gnuplot transcript.

The accepted patterns are the contract with gnuplot's text output:

    G N U P L O T                       (identity banner)
    Version 5.4 patchlevel 2            (patchlevel optional)
    Available terminal types:           (terminal list header)
           png  PNG images using libgd  (one terminal per line)
    Press return for more:              (pager prompt, skipped)

Anything that does not match fails loudly (identity, version) or ends the
terminal list; nothing is guessed.
"""

from __future__ import annotations
import re
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

from ..errors import IdentityError, ParseError
from .schema import Terminal

SIGNATURE = "G N U P L O T"
VERSION_PATTERN = re.compile(r"Version (\d+\.\d+)(?:\s+patchlevel\s+(\d+))?")
HEADER_PATTERN = re.compile(r"^Available terminal types:")
PAGER_PATTERN = re.compile(r"^Press return for more")
TERMINAL_PATTERN = re.compile(r"^\s*(\w+)\s+(.*\S)\s*$")


class ScanState(str, Enum):
    """States of the terminal-list line scanner. There is no way back."""
    SEARCHING_HEADER = "searching_header"
    READING_TERMS = "reading_terms"
    DONE = "done"


class ParsedTranscript(NamedTuple):
    version: str
    patch_level: Optional[str]
    terminals: List[Terminal]


def check_identity(text: str, executable_path: Optional[str] = None) -> None:
    """Raise IdentityError unless the transcript carries the gnuplot banner."""
    if SIGNATURE not in text:
        raise IdentityError.for_path(executable_path)


def parse_version(text: str, executable_path: Optional[str] = None) -> Tuple[str, Optional[str]]:
    """
    Extract ``(version, patch_level)``.

    The version is kept as the exact ``major.minor`` text; patch_level is
    None when gnuplot reports none.
    """
    match = VERSION_PATTERN.search(text)
    if match is None:
        raise ParseError.for_path(executable_path)
    return match.group(1), match.group(2)


def parse_terminals(text: str) -> List[Terminal]:
    """
    Collect terminal entries following the ``Available terminal types:`` header.

    Order and duplicate names are preserved. The first line after the header
    that is neither a pager prompt nor a terminal entry ends the list.
    """
    terminals: List[Terminal] = []
    state = ScanState.SEARCHING_HEADER

    for line in text.splitlines():
        if state is ScanState.SEARCHING_HEADER:
            if HEADER_PATTERN.match(line):
                state = ScanState.READING_TERMS
            continue

        if PAGER_PATTERN.match(line):
            continue
        match = TERMINAL_PATTERN.match(line)
        if match is None:
            state = ScanState.DONE
            break
        terminals.append(Terminal(match.group(1), match.group(2)))

    return terminals


def parse_transcript(text: str, executable_path: Optional[str] = None) -> ParsedTranscript:
    """Run the identity check, version extraction and terminal enumeration in order."""
    check_identity(text, executable_path)
    version, patch_level = parse_version(text, executable_path)
    return ParsedTranscript(version, patch_level, parse_terminals(text))
