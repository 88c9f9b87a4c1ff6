"""Logic for replacing every resolvable id in a block of text with its name."""

from uuid_translator.registry_snapshot import RegistrySnapshot
from uuid_translator.search_by_id import search_by_id
from uuid_translator.search_result import One
from uuid_translator.uuid_pattern import UUID_RE


def replace_ids(snapshot: RegistrySnapshot, text: str) -> str:
    """Replace UUID-shaped tokens that resolve to exactly one element.

    Tokens are found in the original text; each resolved token is replaced
    everywhere it occurs in the working copy. Unresolved tokens stay as-is.
    """
    result = text
    seen: set[str] = set()
    for m in UUID_RE.finditer(text):
        token = m.group(0)
        if token in seen:
            continue
        seen.add(token)
        found = search_by_id(snapshot, token)
        if isinstance(found, One):
            result = result.replace(token, found.element.name)
    return result
