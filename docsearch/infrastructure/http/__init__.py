"""HTTP transport: async client and index handles."""

from docsearch.infrastructure.http.client import Client, Index

__all__ = ["Client", "Index"]
