"""Logic for building a registry snapshot from workspace files."""

import logging
from collections.abc import Iterable
from pathlib import Path
from types import MappingProxyType

import yaml

from uuid_translator.element import Element
from uuid_translator.integrity_warning import (
    DUPLICATE_ID,
    UNPARSEABLE_FILE,
    IntegrityWarning,
)
from uuid_translator.iter_element_entries import iter_element_entries
from uuid_translator.load_element_file import load_element_file
from uuid_translator.registry_snapshot import RegistrySnapshot

logger = logging.getLogger(__name__)


def build_snapshot(files: Iterable[Path]) -> RegistrySnapshot:
    """Parse the files in the given order and index every element found."""
    elements: list[Element] = []
    warnings: list[IntegrityWarning] = []
    for f in files:
        try:
            doc = load_element_file(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            warnings.append(
                IntegrityWarning(UNPARSEABLE_FILE, f"Cannot parse {f}: {e}", f)
            )
            continue
        for it in iter_element_entries(doc, f, warnings):
            kind = str(it.get("type") or "").strip() or "Unknown"
            elements.append(
                Element(
                    id=str(it["id"]).strip(),
                    name=str(it["name"]).strip(),
                    kind=kind,
                    file=f,
                )
            )
    return index_elements(elements, warnings)


def index_elements(
    elements: Iterable[Element], warnings: Iterable[IntegrityWarning] = ()
) -> RegistrySnapshot:
    """Build the by-id and by-name indexes.

    On a duplicate id the later element wins and a warning is recorded.
    """
    ordered = list(elements)
    all_warnings = list(warnings)
    by_id: dict[str, Element] = {}
    for el in ordered:
        key = el.id.lower()
        previous = by_id.get(key)
        if previous is not None:
            all_warnings.append(
                IntegrityWarning(
                    DUPLICATE_ID,
                    f"Duplicate id {el.id}: '{el.name}' ({el.file}) replaces "
                    f"'{previous.name}' ({previous.file})",
                    el.file,
                )
            )
        by_id[key] = el

    winners = tuple(el for el in ordered if by_id[el.id.lower()] is el)
    by_name: dict[str, list[Element]] = {}
    for el in winners:
        by_name.setdefault(el.name, []).append(el)

    for w in all_warnings:
        logger.warning("%s: %s", w.kind, w.message)

    return RegistrySnapshot(
        elements=winners,
        by_id=MappingProxyType(by_id),
        by_name=MappingProxyType({k: tuple(v) for k, v in by_name.items()}),
        warnings=tuple(all_warnings),
    )
