"""Persistent user settings backed by a YAML file."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from uuid_translator.hotkey import Hotkey
from uuid_translator.load_settings import (
    DEFAULT_SETTINGS,
    DEFAULT_SETTINGS_FILE,
    load_settings,
)

logger = logging.getLogger(__name__)

HOTKEY_ACTIONS = ("search_id", "search_name", "replace_ids", "replace_names")


def parse_bool(value: object) -> bool:
    """Read a flag: only True or the text "true" (any case) is true."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


class SettingsStore:
    """Typed access to the settings file; every setter saves immediately."""

    def __init__(self, path: Path | str = DEFAULT_SETTINGS_FILE) -> None:
        """Initialize with defaults; call load() to read the file."""
        self.path = Path(path)
        self.data: dict[str, Any] = copy.deepcopy(DEFAULT_SETTINGS)

    def load(self) -> None:
        """Load settings from disk, keeping defaults if that fails."""
        try:
            self.data = load_settings(self.path)
        except (OSError, ValueError, yaml.YAMLError):
            logger.exception("Reading settings file failed. Using defaults")

    def save(self) -> None:
        """Write settings to disk; failures are logged, not raised."""
        try:
            self.path.write_text(
                yaml.safe_dump(self.data, sort_keys=True), encoding="utf-8"
            )
        except OSError:
            logger.exception("Failed to save settings")

    @property
    def show_type(self) -> bool:
        """Whether results are prefixed with the element type."""
        return parse_bool(self.data.get("show_type"))

    @show_type.setter
    def show_type(self, value: bool | str) -> None:
        logger.info("Setting show type to [%s]", value)
        self.data["show_type"] = parse_bool(value)
        self.save()

    @property
    def last_workspace(self) -> str | None:
        """Directory of the most recently selected workspace."""
        return self.data.get("last_workspace")

    @last_workspace.setter
    def last_workspace(self, value: str) -> None:
        logger.info("Setting last workspace to [%s]", value)
        self.data["last_workspace"] = value
        self.save()

    @property
    def element_globs(self) -> list[str]:
        """Glob patterns selecting element files inside a workspace."""
        return list(self.data.get("element_globs") or DEFAULT_SETTINGS["element_globs"])

    @property
    def workers(self) -> int:
        """Size of the translator worker pool, at least one."""
        return max(1, int(self.data.get("workers") or 1))

    def hotkey(self, action: str) -> Hotkey:
        """Return the binding for one of HOTKEY_ACTIONS."""
        if action not in HOTKEY_ACTIONS:
            msg = f"Unknown hotkey action: {action}"
            raise KeyError(msg)
        hotkeys = self.data.get("hotkeys") or {}
        return Hotkey.parse(hotkeys.get(action) or DEFAULT_SETTINGS["hotkeys"][action])

    def set_hotkey(self, action: str, hotkey: Hotkey) -> None:
        """Store and save the binding for one of HOTKEY_ACTIONS."""
        if action not in HOTKEY_ACTIONS:
            msg = f"Unknown hotkey action: {action}"
            raise KeyError(msg)
        logger.info("Setting %s hotkey to [%s]", action, hotkey)
        self.data.setdefault("hotkeys", {})[action] = str(hotkey)
        self.save()
