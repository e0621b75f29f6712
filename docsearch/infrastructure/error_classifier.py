"""Map transport failures and error bodies to the client error taxonomy.

Service errors are recognized by comparing the raw body against known
literal strings and prefix/suffix shapes. The body is never parsed as
JSON: the server's message is an opaque classification key. Unrecognized
bodies become UnknownException rather than a guess.

The body rules are mutually exclusive, so their order does not change the
outcome. New rules must keep them exclusive.
"""

import logging
from collections.abc import Callable

import httpx

from docsearch.core.constants import (
    BODY_CANT_INFER_PRIMARY_KEY,
    BODY_INDEX_ALREADY_EXISTS,
    BODY_INVALID_INDEX_UID,
    PREFIX_INDEX_NOT_FOUND,
    PREFIX_SERVER_IN_MAINTENANCE,
    SUFFIX_INDEX_NOT_FOUND,
)
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

logger = logging.getLogger(__name__)


def _is_index_not_found(body: str) -> bool:
    return body.startswith(PREFIX_INDEX_NOT_FOUND) and body.endswith(
        SUFFIX_INDEX_NOT_FOUND
    )


_BODY_RULES: tuple[
    tuple[Callable[[str], bool], Callable[[], SearchClientException]], ...
] = (
    (lambda body: body == BODY_INDEX_ALREADY_EXISTS, IndexAlreadyExistsException),
    (lambda body: body == BODY_INVALID_INDEX_UID, InvalidIndexUidException),
    (lambda body: body == BODY_CANT_INFER_PRIMARY_KEY, CantInferPrimaryKeyException),
    (
        lambda body: body.startswith(PREFIX_SERVER_IN_MAINTENANCE),
        ServerInMaintenanceException,
    ),
    (_is_index_not_found, IndexNotFoundException),
)


# Raised by httpx once a response status was already received
_AFTER_RESPONSE_ERRORS = (httpx.DecodingError, httpx.TooManyRedirects)


def classify_error_body(body: str) -> SearchClientException:
    """Return the exception matching a non-success response body.

    Args:
        body: Raw response text, unmodified.

    Returns:
        The recognized exception, or UnknownException(body) when no rule
        matches.
    """
    for matches, make_exception in _BODY_RULES:
        if matches(body):
            return make_exception()
    logger.warning("Unrecognized error body from search server: %.200s", body)
    return UnknownException(body)


def classify_transport_error(exc: httpx.HTTPError) -> SearchClientException:
    """Return the exception for a failure raised by the HTTP layer.

    Errors raised before any response (connection refused, DNS, timeout,
    TLS, protocol) mean the server was never reached. Errors raised after a
    status line was received (status errors, undecodable bodies, redirect
    loops) are passed through as HttpException. Only HTTPStatusError keeps
    a reference to the response, so the others have no status_code.
    """
    if isinstance(exc, httpx.HTTPStatusError):
        return HttpException(str(exc), status_code=exc.response.status_code)
    if isinstance(exc, _AFTER_RESPONSE_ERRORS):
        return HttpException(str(exc) or exc.__class__.__name__)
    return UnreachableServerException(str(exc) or exc.__class__.__name__)
