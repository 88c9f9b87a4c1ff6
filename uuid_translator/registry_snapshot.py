"""Immutable pair of indexes published by the element registry."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from uuid_translator.element import Element
from uuid_translator.integrity_warning import IntegrityWarning


@dataclass(frozen=True)
class RegistrySnapshot:
    """The registry's state at one point in time.

    ``by_id`` is keyed by the lower-cased id. ``by_name`` maps an exact
    name to every element carrying it, in processing order.
    """

    elements: tuple[Element, ...] = ()
    by_id: Mapping[str, Element] = field(
        default_factory=lambda: MappingProxyType({})
    )
    by_name: Mapping[str, tuple[Element, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    warnings: tuple[IntegrityWarning, ...] = ()

    def __len__(self) -> int:
        return len(self.elements)
