"""Shared telemetry: package logger setup."""

from docsearch.shared.telemetry.logging import PACKAGE_LOGGER, setup_logging

__all__ = ["PACKAGE_LOGGER", "setup_logging"]
