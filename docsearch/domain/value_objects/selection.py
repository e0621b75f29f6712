"""Tri-state attribute selection used by search parameters.

A selection is either unset (parameter omitted, server default applies),
all attributes (wildcard marker on the wire) or an explicit ordered list.
The three states must stay distinguishable once serialized.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from docsearch.core.constants import WILDCARD
from docsearch.domain.enums import SelectionKind


@dataclass(frozen=True)
class Selection:
    """Value object for a tri-state selection (Unset / All / Explicit).

    ``items`` is only meaningful for EXPLICIT; it is empty otherwise.
    """

    kind: SelectionKind = SelectionKind.UNSET
    items: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if self.kind is not SelectionKind.EXPLICIT and self.items:
            raise ValueError(f"A {self.kind.value} selection cannot carry items")

    @classmethod
    def unset(cls) -> "Selection":
        return cls(SelectionKind.UNSET)

    @classmethod
    def all(cls) -> "Selection":
        return cls(SelectionKind.ALL)

    @classmethod
    def of(cls, items: Iterable[Any]) -> "Selection":
        """Explicit selection; an empty iterable is a valid, empty list."""
        return cls(SelectionKind.EXPLICIT, tuple(items))

    @classmethod
    def from_optional(cls, items: Iterable[Any] | None) -> "Selection":
        """Map ``None`` to the wildcard and any iterable to an explicit list."""
        return cls.all() if items is None else cls.of(items)

    @property
    def is_set(self) -> bool:
        return self.kind is not SelectionKind.UNSET

    def to_wire(self) -> str | list[Any]:
        """Return the JSON-ready value: ``"*"`` or a list.

        Tuple items (e.g. crop specifiers) become lists. Raises ValueError
        for an unset selection, which must be omitted instead.
        """
        if self.kind is SelectionKind.ALL:
            return WILDCARD
        if self.kind is SelectionKind.EXPLICIT:
            return [list(item) if isinstance(item, tuple) else item for item in self.items]
        raise ValueError("An unset selection has no wire value; omit the field")
