"""Utility for iterating over the element entries of a parsed file."""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from uuid_translator.integrity_warning import INVALID_ENTRY, IntegrityWarning


def iter_element_entries(
    doc: Any, path: Path, warnings: list[IntegrityWarning]
) -> Iterable[dict[str, Any]]:
    """Iterate over usable entries, appending a warning for every skipped one.

    A document is either a mapping with an ``elements`` list or a bare list.
    """
    entries = doc.get("elements") if isinstance(doc, dict) else doc
    if entries is None:
        return
    if not isinstance(entries, list):
        warnings.append(
            IntegrityWarning(INVALID_ENTRY, f"No element list in {path}", path)
        )
        return
    for pos, it in enumerate(entries):
        if (
            isinstance(it, dict)
            and str(it.get("id") or "").strip()
            and str(it.get("name") or "").strip()
        ):
            yield it
        else:
            warnings.append(
                IntegrityWarning(
                    INVALID_ENTRY,
                    f"Skipping entry #{pos} in {path}: missing id or name",
                    path,
                )
            )
