"""Interfaces of the external collaborators driven by the translator."""

from collections.abc import Callable
from typing import Protocol

from uuid_translator.hotkey import Hotkey


class TextSource(Protocol):
    """Where text to search or replace comes from, e.g. a clipboard."""

    def read_text(self) -> str: ...

    def write_text(self, text: str) -> None: ...


class Notifier(Protocol):
    """Shows transient messages to the user."""

    def show_message(self, text: str) -> None: ...

    def show_error(self, text: str) -> None: ...


class KeyListener(Protocol):
    """Global hotkey capture with an explicit register/unregister lifecycle."""

    def register(self, hotkey: Hotkey, callback: Callable[[], object]) -> None: ...

    def unregister_all(self) -> None: ...
