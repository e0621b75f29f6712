"""Search query builder and the immutable request it produces.

Query is a mutable, chainable builder: every ``with_*`` call sets one
optional parameter and returns the same Query. ``build()`` freezes the
current state into a SearchRequest, leaving the builder free to be reused
as a baseline for other requests.

Only parameters that were set are sent; the server default applies to
the rest.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

from docsearch.domain.value_objects import Selection

if TYPE_CHECKING:
    from docsearch.infrastructure.http.client import Index
    from docsearch.schemas.search import SearchResults

T = TypeVar("T")

# (attribute name, optional crop length overriding crop_length)
AttributeToCrop = tuple[str, int | None]


def _check_unsigned(value: Any, name: str) -> int:
    """Return value if it is a non-negative int. Raises ValueError otherwise."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value}")
    return value


def _string_tuple(values: Iterable[str], name: str) -> tuple[str, ...]:
    if isinstance(values, str):
        raise ValueError(f"{name} must be a list of strings, not a string")
    return tuple(values)


def _crop_spec(spec: str | Sequence[Any]) -> AttributeToCrop:
    """Normalize ``"attr"`` or ``("attr", length)`` to a (name, length) pair."""
    if isinstance(spec, str):
        return (spec, None)
    name, length = spec
    if not isinstance(name, str):
        raise ValueError(
            f"crop attribute name must be a string, got {type(name).__name__}"
        )
    if length is not None:
        _check_unsigned(length, f"crop length of {name!r}")
    return (name, length)


@dataclass(frozen=True)
class SearchRequest:
    """Immutable snapshot of a search query, ready to be sent."""

    query: str
    offset: int | None = None
    limit: int | None = None
    filters: str | None = None
    facet_filters: tuple[tuple[str, ...], ...] | None = None
    facets_distribution: Selection = Selection()
    attributes_to_retrieve: tuple[str, ...] | None = None
    attributes_to_crop: Selection = Selection()
    crop_length: int | None = None
    attributes_to_highlight: Selection = Selection()
    matches: bool | None = None

    def to_payload(self) -> dict[str, Any]:
        """Return the request body with camelCase keys; unset fields are omitted."""
        payload: dict[str, Any] = {"q": self.query}
        if self.offset is not None:
            payload["offset"] = self.offset
        if self.limit is not None:
            payload["limit"] = self.limit
        if self.filters is not None:
            payload["filters"] = self.filters
        if self.facet_filters is not None:
            payload["facetFilters"] = [list(group) for group in self.facet_filters]
        if self.facets_distribution.is_set:
            payload["facetsDistribution"] = self.facets_distribution.to_wire()
        if self.attributes_to_retrieve is not None:
            payload["attributesToRetrieve"] = list(self.attributes_to_retrieve)
        if self.attributes_to_crop.is_set:
            payload["attributesToCrop"] = self.attributes_to_crop.to_wire()
        if self.crop_length is not None:
            payload["cropLength"] = self.crop_length
        if self.attributes_to_highlight.is_set:
            payload["attributesToHighlight"] = self.attributes_to_highlight.to_wire()
        if self.matches is not None:
            payload["matches"] = self.matches
        return payload

    def to_json(self) -> str:
        """Compact, deterministic JSON encoding of to_payload()."""
        return json.dumps(self.to_payload(), separators=(",", ":"), ensure_ascii=False)


class Query:
    """Fluent builder for a search request.

    Example:
        request = Query("space").with_offset(42).with_limit(21).build()
    """

    def __init__(self, query: str) -> None:
        self.query = query
        self.offset: int | None = None
        self.limit: int | None = None
        self.filters: str | None = None
        self.facet_filters: tuple[tuple[str, ...], ...] | None = None
        self.facets_distribution = Selection.unset()
        self.attributes_to_retrieve: tuple[str, ...] | None = None
        self.attributes_to_crop = Selection.unset()
        self.crop_length: int | None = None
        self.attributes_to_highlight = Selection.unset()
        self.matches: bool | None = None

    def __repr__(self) -> str:
        return f"Query({self.to_payload()!r})"

    def with_offset(self, offset: int) -> Query:
        """Number of documents to skip (server default: 0)."""
        self.offset = _check_unsigned(offset, "offset")
        return self

    def with_limit(self, limit: int) -> Query:
        """Maximum number of documents returned (server default: 20)."""
        self.limit = _check_unsigned(limit, "limit")
        return self

    def with_filters(self, filters: str) -> Query:
        """Raw filter expression, passed to the server untouched."""
        self.filters = filters
        return self

    def with_facet_filters(self, facet_filters: Sequence[Sequence[str]]) -> Query:
        """Facet filters as AND-ed groups of OR-ed ``"field:value"`` strings.

        ``[["genre:horror", "genre:comedy"], ["director:Jordan Peele"]]`` means
        (horror OR comedy) AND Jordan Peele.
        """
        self.facet_filters = tuple(
            _string_tuple(group, "each facet filter group") for group in facet_filters
        )
        return self

    def with_facets_distribution(self, facets: Sequence[str] | None) -> Query:
        """Facets to count; ``None`` asks for every facet (wildcard)."""
        if facets is not None:
            facets = _string_tuple(facets, "facets_distribution")
        self.facets_distribution = Selection.from_optional(facets)
        return self

    def with_attributes_to_retrieve(self, attributes: Sequence[str]) -> Query:
        self.attributes_to_retrieve = _string_tuple(attributes, "attributes_to_retrieve")
        return self

    def with_attributes_to_crop(
        self, attributes: Sequence[str | AttributeToCrop] | None
    ) -> Query:
        """Attributes to crop; ``None`` crops every attribute (wildcard).

        Items are ``(name, length)`` pairs where ``length`` (or ``None``)
        overrides crop_length for that attribute. A bare name means
        ``(name, None)``.
        """
        if attributes is not None:
            if isinstance(attributes, str):
                raise ValueError("attributes_to_crop must be a list, not a string")
            attributes = [_crop_spec(spec) for spec in attributes]
        self.attributes_to_crop = Selection.from_optional(attributes)
        return self

    def with_crop_length(self, crop_length: int) -> Query:
        """Characters kept on each side of a match in cropped fields (server default: 200)."""
        self.crop_length = _check_unsigned(crop_length, "crop_length")
        return self

    def with_attributes_to_highlight(self, attributes: Sequence[str] | None) -> Query:
        """Attributes whose matches are highlighted; ``None`` highlights all (wildcard)."""
        if attributes is not None:
            attributes = _string_tuple(attributes, "attributes_to_highlight")
        self.attributes_to_highlight = Selection.from_optional(attributes)
        return self

    def with_matches(self, matches: bool) -> Query:
        """Whether hits include ``_matchesInfo`` match positions."""
        if not isinstance(matches, bool):
            raise ValueError(f"matches must be a bool, got {type(matches).__name__}")
        self.matches = matches
        return self

    def build(self) -> SearchRequest:
        """Freeze the current parameters into an independent SearchRequest."""
        return SearchRequest(
            query=self.query,
            offset=self.offset,
            limit=self.limit,
            filters=self.filters,
            facet_filters=self.facet_filters,
            facets_distribution=self.facets_distribution,
            attributes_to_retrieve=self.attributes_to_retrieve,
            attributes_to_crop=self.attributes_to_crop,
            crop_length=self.crop_length,
            attributes_to_highlight=self.attributes_to_highlight,
            matches=self.matches,
        )

    def to_payload(self) -> dict[str, Any]:
        return self.build().to_payload()

    def to_json(self) -> str:
        return self.build().to_json()

    async def execute(self, index: Index, document_type: type[T]) -> SearchResults[T]:
        """Alias for ``index.search(self.build(), document_type)``."""
        return await index.search(self.build(), document_type)
