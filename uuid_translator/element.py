"""Data model for an indexed workspace element."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Element:
    """Represents an addressable element (id, name, type) from a workspace file."""

    id: str
    name: str
    kind: str  # read from the "type" key; display-only
    file: Path
