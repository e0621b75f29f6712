"""Single request helper for the search server REST API.

Every call goes through _request_async so that failures are mapped to the
client error taxonomy in one place. All HTTP calls use httpx.AsyncClient
so they do not block the event loop.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from docsearch.core.constants import API_KEY_HEADER
from docsearch.infrastructure.error_classifier import (
    classify_error_body,
    classify_transport_error,
)

logger = logging.getLogger(__name__)


async def _request_async(
    client: httpx.AsyncClient,
    url: str,
    method: str = "GET",
    body: Any = None,
    params: dict[str, str] | None = None,
    api_key: str | None = None,
) -> bytes:
    """Perform an async HTTP request and return the raw success body.

    Raises:
        UnreachableServerException: no response was obtained.
        HttpException: the HTTP layer failed with a response attached.
        SearchClientException: a non-2xx response, classified from its body.
    """
    headers = {"Content-Type": "application/json"}
    if api_key:
        headers[API_KEY_HEADER] = api_key
    logger.debug("%s %s", method, url)
    try:
        if method == "GET":
            resp = await client.get(url, headers=headers, params=params)
        elif method == "POST":
            resp = await client.post(url, headers=headers, params=params, json=body)
        elif method == "PUT":
            resp = await client.put(url, headers=headers, params=params, json=body)
        elif method == "DELETE":
            resp = await client.delete(url, headers=headers, params=params)
        else:
            raise ValueError(f"Unsupported method: {method!r}")
    except httpx.HTTPError as exc:
        logger.warning("%s %s failed: %s", method, url, exc)
        raise classify_transport_error(exc) from exc
    if not resp.is_success:
        logger.debug("%s %s returned %s", method, url, resp.status_code)
        raise classify_error_body(resp.text)
    return resp.content
