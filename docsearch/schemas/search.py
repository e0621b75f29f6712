"""Search response schemas.

Hits arrive flattened: the document's own fields sit at the top level
next to the optional ``_formatted`` and ``_matchesInfo`` side-channels.
SearchResult splits them back apart so that ``result`` is validated as
the caller's document type.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, NonNegativeInt, model_validator
from pydantic.alias_generators import to_camel

from docsearch.core.constants import FORMATTED_KEY, MATCHES_INFO_KEY
from docsearch.schemas.decoding import decode_as

T = TypeVar("T")

_FIELD_NAMES = frozenset({"result", "formatted_result", "matches_info"})


class MatchRange(BaseModel):
    """Position of one match inside a field value."""

    start: NonNegativeInt
    length: NonNegativeInt


class SearchResult(BaseModel, Generic[T]):
    """Single search hit.

    ``formatted_result`` is present when highlighting or cropping was
    requested; ``matches_info`` when ``matches`` was requested.
    """

    result: T
    formatted_result: T | None = None
    matches_info: dict[str, list[MatchRange]] | None = None

    @model_validator(mode="before")
    @classmethod
    def split_hit(cls, data: Any) -> Any:
        """Separate the document fields from the side-channel keys.

        Input already keyed by field name (keyword construction or a
        model_dump) passes through unchanged.
        """
        if not isinstance(data, dict):
            return data
        if "result" in data and set(data) <= _FIELD_NAMES:
            return data
        document = {
            key: value
            for key, value in data.items()
            if key not in (FORMATTED_KEY, MATCHES_INFO_KEY)
        }
        return {
            "result": document,
            "formatted_result": data.get(FORMATTED_KEY),
            "matches_info": data.get(MATCHES_INFO_KEY),
        }


class SearchResults(BaseModel, Generic[T]):
    """Search response envelope: hits plus paging and timing information."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    hits: list[SearchResult[T]]
    offset: NonNegativeInt
    limit: NonNegativeInt
    nb_hits: NonNegativeInt
    exhaustive_nb_hits: bool
    facets_distribution: dict[str, dict[str, NonNegativeInt]] | None = None
    exhaustive_facets_count: bool | None = None
    processing_time_ms: NonNegativeInt
    query: str


def decode_search_results(body: str | bytes, document_type: type[T]) -> SearchResults[T]:
    """Decode a search response body, validating each hit as ``document_type``.

    Raises:
        UnknownException: malformed JSON, missing envelope field, or a hit
            lacking a field required by document_type.
    """
    return decode_as(body, SearchResults[document_type])
