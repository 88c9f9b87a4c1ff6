"""Data model for problems found while rebuilding the registry."""

from dataclasses import dataclass
from pathlib import Path

DUPLICATE_ID = "duplicate_id"
UNPARSEABLE_FILE = "unparseable_file"
INVALID_ENTRY = "invalid_entry"


@dataclass(frozen=True)
class IntegrityWarning:
    """A non-fatal problem reported by a rebuild."""

    kind: str
    message: str
    file: Path | None = None
