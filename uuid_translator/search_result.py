"""Tagged result variants returned by the id and name lookups."""

from dataclasses import dataclass, field

from uuid_translator.element import Element


@dataclass(frozen=True)
class Invalid:
    """The input was not a lookup candidate (blank, or not shaped like an id)."""


@dataclass(frozen=True)
class Empty:
    """The input was a valid candidate but matched nothing."""

    message: str


@dataclass(frozen=True)
class Multiple:
    """The input matched more than one element."""

    message: str
    candidates: tuple[Element, ...] = field(default=())


@dataclass(frozen=True)
class One:
    """The input matched exactly one element."""

    element: Element


SearchResult = Invalid | Empty | Multiple | One
