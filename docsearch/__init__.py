"""Typed async client for a document-search server.

Build a Query, run it against an Index, and get SearchResults[T] back.
Every failure is raised as a SearchClientException subclass.
"""

import logging

from docsearch.core.config import Settings, get_settings
from docsearch.domain import (
    CantInferPrimaryKeyException,
    ErrorKind,
    HttpException,
    IndexAlreadyExistsException,
    IndexNotFoundException,
    InvalidIndexUidException,
    Query,
    SearchClientException,
    SearchRequest,
    Selection,
    SelectionKind,
    ServerInMaintenanceException,
    UnknownException,
    UnreachableServerException,
)
from docsearch.infrastructure.error_classifier import (
    classify_error_body,
    classify_transport_error,
)
from docsearch.infrastructure.http import Client, Index
from docsearch.schemas import (
    IndexInfo,
    MatchRange,
    SearchResult,
    SearchResults,
    UpdateReceipt,
    decode_search_results,
)
from docsearch.shared.telemetry import setup_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CantInferPrimaryKeyException",
    "Client",
    "ErrorKind",
    "HttpException",
    "Index",
    "IndexAlreadyExistsException",
    "IndexInfo",
    "IndexNotFoundException",
    "InvalidIndexUidException",
    "MatchRange",
    "Query",
    "SearchClientException",
    "SearchRequest",
    "SearchResult",
    "SearchResults",
    "Selection",
    "SelectionKind",
    "ServerInMaintenanceException",
    "Settings",
    "UnknownException",
    "UnreachableServerException",
    "UpdateReceipt",
    "classify_error_body",
    "classify_transport_error",
    "decode_search_results",
    "get_settings",
    "setup_logging",
]
