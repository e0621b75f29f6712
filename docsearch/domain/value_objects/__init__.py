"""Domain value objects."""

from docsearch.domain.value_objects.selection import Selection

__all__ = ["Selection"]
