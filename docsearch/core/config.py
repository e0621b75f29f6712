"""Client configuration (settings and environment).

Single source of truth for connection configuration. Uses pydantic-settings
with .env support. Variables are read with the DOCSEARCH_ prefix
(e.g. DOCSEARCH_HOST, DOCSEARCH_API_KEY).
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment and .env.

    All settings have defaults suitable for a local search server.
    """

    # Server
    host: str = "http://localhost:7700"
    api_key: SecretStr | None = None

    # Transport: total per-request timeout handed to httpx
    timeout_seconds: float = 30.0

    # Logging
    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="DOCSEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_host_and_timeout(self) -> "Settings":
        """Validate the server URL scheme and the timeout.

        - host must start with http:// or https://.
        - timeout_seconds must be positive.
        """
        if not self.host.startswith(("http://", "https://")):
            raise ValueError(
                f"host must start with 'http://' or 'https://', got: {self.host!r}"
            )
        if self.timeout_seconds <= 0:
            raise ValueError(
                f"timeout_seconds must be positive, got: {self.timeout_seconds}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached client settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
