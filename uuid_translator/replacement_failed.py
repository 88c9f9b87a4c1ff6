"""Error raised when a bulk replacement cannot read its source."""


class ReplacementFailed(Exception):
    """Raised when reading the text to replace fails; nothing is written."""
