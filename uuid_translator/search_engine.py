"""Lookups and bulk replacements bound to a live registry."""

from typing import TextIO

from uuid_translator.element_registry import ElementRegistry
from uuid_translator.replace_ids import replace_ids
from uuid_translator.replace_names import replace_names
from uuid_translator.search_by_id import search_by_id
from uuid_translator.search_by_name import search_by_name
from uuid_translator.search_result import SearchResult


class SearchEngine:
    """Runs each operation against the snapshot current when it starts."""

    def __init__(self, registry: ElementRegistry) -> None:
        """Bind the engine to a registry."""
        self.registry = registry

    def search_by_id(self, raw: str) -> SearchResult:
        """Look up an id in the current snapshot."""
        return search_by_id(self.registry.current_snapshot(), raw)

    def search_by_name(self, raw: str) -> SearchResult:
        """Look up a name in the current snapshot."""
        return search_by_name(self.registry.current_snapshot(), raw)

    def replace_ids(self, text: str) -> str:
        """Replace resolvable ids using one snapshot for the whole text."""
        return replace_ids(self.registry.current_snapshot(), text)

    def replace_names(self, source: str | TextIO) -> str:
        """Replace lines naming one element using one snapshot."""
        return replace_names(self.registry.current_snapshot(), source)
