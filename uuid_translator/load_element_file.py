"""Logic for loading workspace element files."""

from pathlib import Path
from typing import Any

import yaml


def load_element_file(path: Path) -> Any:
    """Load and parse a YAML element file.

    Raises OSError, UnicodeDecodeError or yaml.YAMLError when the file is
    unreadable; the caller decides how to report it.
    """
    doc = yaml.safe_load(path.read_text(encoding="utf-8"))
    return doc or {}
