"""Pytest configuration and fixtures for docsearch.

HTTP tests run against httpx.MockTransport; no server is needed.
"""

from collections.abc import Callable

import httpx
import pytest

from docsearch.core.config import get_settings
from docsearch.infrastructure.http import Client

HOST = "http://search.test"

Handler = Callable[[httpx.Request], httpx.Response]

_ENV_VARS = (
    "DOCSEARCH_HOST",
    "DOCSEARCH_API_KEY",
    "DOCSEARCH_TIMEOUT_SECONDS",
    "DOCSEARCH_DEBUG",
)


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from DOCSEARCH_* env vars and the cached Settings."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_client() -> Callable[..., Client]:
    """Factory: Client whose HTTP calls are answered by ``handler``."""

    def _make(handler: Handler, api_key: str | None = None) -> Client:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return Client(HOST, api_key, http_client=http)

    return _make
