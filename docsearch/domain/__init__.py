"""Domain layer: query builder, value objects, enums, and exceptions.

No dependencies on the HTTP transport. Used by the schemas and
infrastructure layers.
"""

from docsearch.domain.enums import ErrorKind, SelectionKind
from docsearch.domain.exceptions import (
    CantInferPrimaryKeyException,
    HttpException,
    IndexAlreadyExistsException,
    IndexNotFoundException,
    InvalidIndexUidException,
    SearchClientException,
    ServerInMaintenanceException,
    UnknownException,
    UnreachableServerException,
)
from docsearch.domain.query import Query, SearchRequest
from docsearch.domain.value_objects import Selection

__all__ = [
    # Enums
    "ErrorKind",
    "SelectionKind",
    # Exceptions
    "CantInferPrimaryKeyException",
    "HttpException",
    "IndexAlreadyExistsException",
    "IndexNotFoundException",
    "InvalidIndexUidException",
    "SearchClientException",
    "ServerInMaintenanceException",
    "UnknownException",
    "UnreachableServerException",
    # Query
    "Query",
    "SearchRequest",
    # Value objects
    "Selection",
]
