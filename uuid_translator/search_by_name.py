"""Lookup of a single element by its exact name."""

from uuid_translator.registry_snapshot import RegistrySnapshot
from uuid_translator.search_result import Empty, Invalid, Multiple, One, SearchResult


def search_by_name(snapshot: RegistrySnapshot, raw: str) -> SearchResult:
    """Resolve a name; case-sensitive, never guesses between collisions."""
    text = raw.strip()
    if not text:
        return Invalid()
    matches = snapshot.by_name.get(text, ())
    if not matches:
        return Empty(f"No element found for name '{raw}'")
    if len(matches) > 1:
        ids = ", ".join(el.id for el in matches)
        return Multiple(f"Multiple elements found for name '{raw}': {ids}", matches)
    return One(matches[0])
