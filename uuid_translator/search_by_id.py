"""Lookup of a single element by its id."""

from uuid_translator.registry_snapshot import RegistrySnapshot
from uuid_translator.search_result import Empty, Invalid, One, SearchResult
from uuid_translator.uuid_pattern import is_uuid


def search_by_id(snapshot: RegistrySnapshot, raw: str) -> SearchResult:
    """Resolve a UUID-shaped string, ignoring case."""
    text = raw.strip()
    if not text or not is_uuid(text):
        return Invalid()
    element = snapshot.by_id.get(text.lower())
    if element is None:
        return Empty(f"No element found for id '{raw}'")
    return One(element)
