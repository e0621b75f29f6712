"""Decode JSON response bodies into typed values.

Any decoding failure becomes an UnknownException carrying the pydantic
error text, so callers only ever see the client's error taxonomy.
"""

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from docsearch.domain.exceptions import UnknownException

logger = logging.getLogger(__name__)


def decode_as(body: str | bytes, target: Any) -> Any:
    """Validate a JSON body against ``target`` (any pydantic-supported type).

    Raises:
        UnknownException: body is not valid JSON or does not match target.
    """
    try:
        return TypeAdapter(target).validate_json(body)
    except ValidationError as exc:
        logger.warning("Failed to decode response body as %r", target)
        raise UnknownException(str(exc)) from exc
