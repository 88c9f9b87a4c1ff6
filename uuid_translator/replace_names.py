"""Logic for replacing whole lines that name an element with its id."""

import re
from typing import TextIO

from uuid_translator.registry_snapshot import RegistrySnapshot
from uuid_translator.replacement_failed import ReplacementFailed
from uuid_translator.search_by_name import search_by_name
from uuid_translator.search_result import One

LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
LINE_SEPARATOR = "\n"


def replace_names(snapshot: RegistrySnapshot, source: str | TextIO) -> str:
    """Replace each line whose trimmed text names exactly one element.

    Other lines are kept verbatim and the line count never changes. A read
    failure on a stream source raises ReplacementFailed.
    """
    if isinstance(source, str):
        text = source
    else:
        try:
            text = source.read()
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Reading replacement source failed: {e}"
            raise ReplacementFailed(msg) from e

    out = []
    for line in LINE_BREAK_RE.split(text):
        found = search_by_name(snapshot, line)
        out.append(found.element.id if isinstance(found, One) else line)
    return LINE_SEPARATOR.join(out)
