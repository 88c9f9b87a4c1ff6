"""Regular expressions for the canonical UUID text form."""

import re

UUID_PATTERN = (
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
UUID_RE = re.compile(UUID_PATTERN)


def is_uuid(text: str) -> bool:
    """Check whether the whole string is shaped like a UUID."""
    return UUID_RE.fullmatch(text) is not None
