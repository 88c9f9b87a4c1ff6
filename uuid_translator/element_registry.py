"""Registry holding the current element snapshot."""

import logging
import threading
from collections.abc import Iterable
from pathlib import Path

from uuid_translator.build_snapshot import build_snapshot
from uuid_translator.registry_snapshot import RegistrySnapshot

logger = logging.getLogger(__name__)


class ElementRegistry:
    """Owns the current snapshot and replaces it wholesale on rebuild.

    Readers call ``current_snapshot()`` once per operation and never lock.
    Rebuilds are serialized: a rebuild requested while another is running
    waits for it to finish and then runs in full.
    """

    def __init__(self) -> None:
        """Start with an empty snapshot."""
        self._snapshot = RegistrySnapshot()
        self._rebuild_lock = threading.Lock()

    def current_snapshot(self) -> RegistrySnapshot:
        """Return the most recently published snapshot."""
        return self._snapshot

    def rebuild(self, files: Iterable[Path | str]) -> RegistrySnapshot:
        """Re-index the given files and publish the result."""
        ordered = sorted({Path(f) for f in files})
        with self._rebuild_lock:
            logger.info("Rebuilding registry from %d files", len(ordered))
            snapshot = build_snapshot(ordered)
            # Single reference assignment; readers see the old or new snapshot.
            self._snapshot = snapshot
            logger.info(
                "Registry rebuilt: %d elements, %d warnings",
                len(snapshot),
                len(snapshot.warnings),
            )
        return snapshot
