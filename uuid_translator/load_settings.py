"""Logic for loading the settings file and merging it with defaults."""

import copy
from pathlib import Path
from typing import Any

import yaml

from uuid_translator.deep_merge import deep_merge

DEFAULT_SETTINGS_FILE = "settings.yml"

DEFAULT_SETTINGS: dict[str, Any] = {
    "hotkeys": {
        "search_id": "ctrl+C",
        "search_name": "ctrl+shift+C",
        "replace_ids": "ctrl+R",
        "replace_names": "ctrl+shift+R",
    },
    "show_type": False,
    "last_workspace": None,
    "element_globs": ["*.yml", "*.yaml"],
    "workers": 2,
}


def load_settings(path: Path | str | None = None) -> dict[str, Any]:
    """Load settings from a YAML file and merge them with defaults.

    A missing file yields the defaults; read and parse errors propagate.
    """
    settings = copy.deepcopy(DEFAULT_SETTINGS)
    if path:
        p = Path(path)
        if p.exists():
            user_settings = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_settings, dict):
                msg = f"Settings file must hold a mapping: {p}"
                raise ValueError(msg)
            settings = deep_merge(settings, user_settings)
    return settings
