"""Response schemas (pydantic) and body decoding."""

from docsearch.schemas.decoding import decode_as
from docsearch.schemas.indexes import IndexInfo, UpdateReceipt
from docsearch.schemas.search import (
    MatchRange,
    SearchResult,
    SearchResults,
    decode_search_results,
)

__all__ = [
    "IndexInfo",
    "MatchRange",
    "SearchResult",
    "SearchResults",
    "UpdateReceipt",
    "decode_as",
    "decode_search_results",
]
