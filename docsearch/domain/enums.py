"""Domain enumerations for the search client.

Enums represent fixed sets of values (error kinds, selection states).
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds a search call can end with.

    Every exception raised by the client carries exactly one of these as
    its ``kind`` (and its value as ``error_code``).
    """

    UNREACHABLE_SERVER = "UNREACHABLE_SERVER"
    INDEX_ALREADY_EXIST = "INDEX_ALREADY_EXIST"
    INDEX_NOT_FOUND = "INDEX_NOT_FOUND"
    INVALID_INDEX_UID = "INVALID_INDEX_UID"
    CANT_INFER_PRIMARY_KEY = "CANT_INFER_PRIMARY_KEY"
    SERVER_IN_MAINTENANCE = "SERVER_IN_MAINTENANCE"
    HTTP = "HTTP"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def values(cls) -> list[str]:
        """Return all error kind values as strings.

        Returns:
            List of enum value strings (e.g. for logging or serialization).
        """
        return [kind.value for kind in cls]


class SelectionKind(str, Enum):
    """State of a tri-state attribute selection parameter."""

    UNSET = "unset"
    ALL = "all"
    EXPLICIT = "explicit"
