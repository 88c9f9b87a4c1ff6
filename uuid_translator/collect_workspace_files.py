"""Logic for discovering element files inside a workspace directory."""

from collections.abc import Iterable
from pathlib import Path


def collect_workspace_files(root: Path | str, globs: Iterable[str]) -> list[Path]:
    """Return the sorted element files under root matching any of the globs."""
    root = Path(root)
    if not root.is_dir():
        msg = f"Workspace directory not found: {root}"
        raise FileNotFoundError(msg)
    files: set[Path] = set()
    for pattern in globs:
        files.update(p for p in root.rglob(pattern) if p.is_file())
    return sorted(files)
