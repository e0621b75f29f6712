"""Logging for the docsearch package logger.

The library never touches the root logger. Importing docsearch attaches a
NullHandler to the ``docsearch`` logger; applications that want the
client's request and classification logs call setup_logging() or
configure ``logging.getLogger("docsearch")`` themselves.
"""

import logging
import sys

from docsearch.core.config import Settings, get_settings

PACKAGE_LOGGER = "docsearch"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class _StdoutHandler(logging.StreamHandler):
    """Handler installed by setup_logging (lets a second call replace it)."""

    def __init__(self) -> None:
        super().__init__(sys.stdout)
        self.setFormatter(logging.Formatter(_FORMAT))


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """Send docsearch logs to stdout.

    Level is DEBUG when settings.debug is True (every request is logged),
    otherwise WARNING (transport failures and unrecognized error bodies).
    Calling it again replaces the handler instead of adding a second one.

    Returns:
        The configured package logger.
    """
    settings = settings or get_settings()
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in [h for h in logger.handlers if isinstance(h, _StdoutHandler)]:
        logger.removeHandler(handler)
    logger.addHandler(_StdoutHandler())
    logger.setLevel(logging.DEBUG if settings.debug else logging.WARNING)
    return logger
