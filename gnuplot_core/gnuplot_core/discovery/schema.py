"""
Discovery Schema - immutable record of a verified gnuplot executable.

A DiscoveryResult is only ever built from a transcript that passed the
identity and version checks, so holding one means discovery succeeded.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple
from pydantic import BaseModel, ConfigDict, field_validator


def parse_version_string(version: str) -> Tuple[int, int]:
    """
    Convert ``"major.minor"`` to a comparable ``(major, minor)`` tuple.

    Raises:
        ValueError: If the string is not two dot-separated integers
    """
    parts = str(version).strip().split(".")
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError(f"not a major.minor version: {version!r}")
    return int(parts[0]), int(parts[1])


class Terminal(NamedTuple):
    """A gnuplot output driver (file format or display device)."""
    name: str
    description: str


class DiscoveryResult(BaseModel):
    """
    Metadata reported by a genuine gnuplot.

    ``terminals`` keeps every listed terminal in the order gnuplot printed
    them, duplicates included. ``terms`` is the name -> description view,
    where a later duplicate overwrites an earlier one.
    """
    model_config = ConfigDict(frozen=True)

    executable_path: str
    version: str
    patch_level: Optional[str] = None
    terminals: Tuple[Terminal, ...] = ()

    @field_validator("version")
    @classmethod
    def _check_version(cls, v: str) -> str:
        parse_version_string(v)
        return v

    @property
    def terms(self) -> Mapping[str, str]:
        return MappingProxyType({t.name: t.description for t in self.terminals})

    @property
    def terminal_names(self) -> Tuple[str, ...]:
        return tuple(t.name for t in self.terminals)

    @property
    def version_info(self) -> Tuple[int, int]:
        return parse_version_string(self.version)

    def supports(self, terminal: str) -> bool:
        """Check whether gnuplot listed ``terminal`` among its output drivers."""
        return terminal in self.terms

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "executable_path": self.executable_path,
            "version": self.version,
            "patch_level": self.patch_level,
            "terminals": [{"name": t.name, "description": t.description} for t in self.terminals],
        }
