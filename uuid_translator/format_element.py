"""Formatting of search results for display."""

from dataclasses import dataclass
from typing import Literal

from uuid_translator.element import Element
from uuid_translator.search_result import Empty, Invalid, Multiple, One, SearchResult

DisplayField = Literal["id", "name"]


@dataclass(frozen=True)
class Notice:
    """Text to show the user, flagged when it reports a failed lookup."""

    text: str
    is_error: bool = False


def format_element(element: Element, field: DisplayField, *, show_type: bool) -> str:
    """Return the requested field, prefixed with "<type>/" when show_type is set."""
    value = getattr(element, field)
    if show_type:
        return f"{element.kind}/{value}"
    return value


def describe_result(
    result: SearchResult, field: DisplayField, *, show_type: bool
) -> Notice | None:
    """Decide what to show for a result; Invalid input shows nothing."""
    if isinstance(result, Invalid):
        return None
    if isinstance(result, (Empty, Multiple)):
        return Notice(result.message, is_error=True)
    if isinstance(result, One):
        return Notice(format_element(result.element, field, show_type=show_type))
    msg = f"Unknown search result type: {type(result).__name__}"
    raise TypeError(msg)
