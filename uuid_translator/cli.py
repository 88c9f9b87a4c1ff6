"""Command-line front end for looking up and replacing element ids and names.

Indexes the element files of a workspace directory, then runs a single
search or replacement on text given as an argument or piped on stdin.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from uuid_translator.collect_workspace_files import collect_workspace_files
from uuid_translator.element_registry import ElementRegistry
from uuid_translator.format_element import describe_result
from uuid_translator.load_settings import DEFAULT_SETTINGS_FILE
from uuid_translator.replacement_failed import ReplacementFailed
from uuid_translator.search_engine import SearchEngine
from uuid_translator.settings_store import SettingsStore

EXIT_OK = 0
EXIT_UNRESOLVED = 1
EXIT_INVALID = 2

SEARCHES = {"search-id": "name", "search-name": "id"}


def run_command(args: argparse.Namespace) -> int:
    """Build the registry and execute the requested operation."""
    settings = SettingsStore(args.settings)
    settings.load()

    workspace = args.workspace or settings.last_workspace
    if not workspace:
        msg = "No workspace given and none remembered in the settings file"
        raise SystemExit(msg)
    try:
        files = collect_workspace_files(workspace, settings.element_globs)
    except FileNotFoundError as e:
        raise SystemExit(str(e)) from e
    if not files:
        msg = f"No element files found under: {workspace}"
        raise SystemExit(msg)

    registry = ElementRegistry()
    registry.rebuild(files)
    engine = SearchEngine(registry)
    text = args.text if args.text is not None else sys.stdin.read()

    if args.command in SEARCHES:
        if args.command == "search-id":
            search = engine.search_by_id
        else:
            search = engine.search_by_name
        show_type = args.show_type or settings.show_type
        notice = describe_result(
            search(text), SEARCHES[args.command], show_type=show_type
        )
        if notice is None:
            return EXIT_INVALID
        if notice.is_error:
            print(notice.text, file=sys.stderr)
            return EXIT_UNRESOLVED
        print(notice.text)
        return EXIT_OK

    try:
        if args.command == "replace-ids":
            result = engine.replace_ids(text)
        else:
            result = engine.replace_names(text)
    except ReplacementFailed as e:
        print(f"Replacement failed: {e}", file=sys.stderr)
        return EXIT_UNRESOLVED
    sys.stdout.write(result)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run one operation."""
    ap = argparse.ArgumentParser(
        description="Translate element ids to names and names to ids.",
    )
    ap.add_argument(
        "command",
        choices=["search-id", "search-name", "replace-ids", "replace-names"],
        help="Operation to run",
    )
    ap.add_argument(
        "text",
        nargs="?",
        help="Text to process (default: read from stdin)",
    )
    ap.add_argument(
        "--workspace",
        type=Path,
        help="Directory of element files (default: last workspace in settings)",
    )
    ap.add_argument(
        "--settings",
        default=DEFAULT_SETTINGS_FILE,
        help=f"Path to the settings file (default: {DEFAULT_SETTINGS_FILE})",
    )
    ap.add_argument(
        "--show-type",
        action="store_true",
        help="Prefix search results with the element type",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_command(args)


if __name__ == "__main__":
    raise SystemExit(main())
