"""Orchestration of workspace rebuilds, lookups and replacements.

Every user-triggered action reads its input on the calling thread and runs
the work on a small thread pool, so a slow rebuild never stalls a search.
"""

import logging
from collections.abc import Callable
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from pathlib import Path

from uuid_translator.collaborators import KeyListener, Notifier, TextSource
from uuid_translator.collect_workspace_files import collect_workspace_files
from uuid_translator.element_registry import ElementRegistry
from uuid_translator.format_element import DisplayField, describe_result
from uuid_translator.registry_snapshot import RegistrySnapshot
from uuid_translator.replacement_failed import ReplacementFailed
from uuid_translator.search_engine import SearchEngine
from uuid_translator.search_result import SearchResult
from uuid_translator.settings_store import SettingsStore

logger = logging.getLogger(__name__)


class Translator:
    """Connects the registry to a text source, a notifier and hotkeys."""

    def __init__(
        self,
        settings: SettingsStore,
        text_source: TextSource,
        notifier: Notifier,
        registry: ElementRegistry | None = None,
        executor: Executor | None = None,
    ) -> None:
        self.settings = settings
        self.text_source = text_source
        self.notifier = notifier
        self.registry = registry or ElementRegistry()
        self.engine = SearchEngine(self.registry)
        self.executor = executor or ThreadPoolExecutor(
            max_workers=settings.workers, thread_name_prefix="uuid-translator"
        )

    # -----------------------------
    # Workspace
    # -----------------------------

    def select_workspace(self, path: Path | str) -> Future | None:
        """Remember the workspace and rebuild the registry from it."""
        self.settings.last_workspace = str(path)
        return self.update_workspace()

    def update_workspace(self) -> Future | None:
        """Rebuild the registry from the last selected workspace."""
        workspace = self.settings.last_workspace
        if not workspace:
            self.notifier.show_error("No workspace selected")
            return None
        return self.executor.submit(
            self._rebuild, workspace, list(self.settings.element_globs)
        )

    def _rebuild(self, workspace: str, globs: list[str]) -> RegistrySnapshot | None:
        try:
            files = collect_workspace_files(workspace, globs)
        except FileNotFoundError as e:
            logger.error("Cannot update workspace: %s", e)
            self.notifier.show_error(str(e))
            return None
        self.notifier.show_message("Updating registry...")
        snapshot = self.registry.rebuild(files)
        self.notifier.show_message("Update done.")
        return snapshot

    # -----------------------------
    # Lookups
    # -----------------------------

    def search_id(self) -> Future:
        """Look up the source text as an id and show the element's name."""
        text = self._read_for_search()
        return self.executor.submit(
            self._search, self.engine.search_by_id, text, "name"
        )

    def search_name(self) -> Future:
        """Look up the source text as a name and show the element's id."""
        text = self._read_for_search()
        return self.executor.submit(
            self._search, self.engine.search_by_name, text, "id"
        )

    def _read_for_search(self) -> str:
        try:
            return self.text_source.read_text().strip()
        except OSError:
            logger.warning("Reading text source failed", exc_info=True)
            return ""

    def _search(
        self, search: Callable[[str], SearchResult], text: str, field: DisplayField
    ) -> SearchResult:
        result = search(text)
        notice = describe_result(result, field, show_type=self.settings.show_type)
        if notice is None:
            return result
        if notice.is_error:
            self.notifier.show_error(notice.text)
        else:
            self.notifier.show_message(notice.text)
        return result

    # -----------------------------
    # Replacements
    # -----------------------------

    def replace_ids(self) -> Future | None:
        """Replace every resolvable id in the source text with its name."""
        return self._schedule_replacement("ids", self.engine.replace_ids)

    def replace_names(self) -> Future | None:
        """Replace every line naming exactly one element with its id."""
        return self._schedule_replacement("names", self.engine.replace_names)

    def _schedule_replacement(
        self, what: str, replace: Callable[[str], str]
    ) -> Future | None:
        try:
            text = self.text_source.read_text()
        except OSError:
            logger.exception("Reading text source failed")
            self.notifier.show_error("Replacement failed")
            return None
        return self.executor.submit(self._replace, what, replace, text)

    def _replace(
        self, what: str, replace: Callable[[str], str], text: str
    ) -> str | None:
        logger.debug("Replacing all %s", what)
        try:
            result = replace(text)
            self.text_source.write_text(result)
        except (ReplacementFailed, OSError):
            logger.exception("Replacement failed")
            self.notifier.show_error("Replacement failed")
            return None
        logger.debug("Replacement complete.")
        self.notifier.show_message("Replacement complete.")
        return result

    # -----------------------------
    # Lifecycle
    # -----------------------------

    def bind_hotkeys(self, listener: KeyListener) -> None:
        """(Re)register the four actions with the configured hotkeys."""
        listener.unregister_all()
        listener.register(self.settings.hotkey("search_id"), self.search_id)
        listener.register(self.settings.hotkey("search_name"), self.search_name)
        listener.register(self.settings.hotkey("replace_ids"), self.replace_ids)
        listener.register(self.settings.hotkey("replace_names"), self.replace_names)

    def shutdown(self, *, wait: bool = True) -> None:
        """Stop the worker pool."""
        self.executor.shutdown(wait=wait)
