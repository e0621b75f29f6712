"""Domain exceptions for the search client.

Closed taxonomy: every failure of a call (transport, service or decoding)
surfaces as exactly one subclass of SearchClientException. Each subclass
pins a single ErrorKind so callers can branch on ``exc.kind`` or catch by
class.
"""

from typing import Any, ClassVar

from docsearch.domain.enums import ErrorKind


class SearchClientException(Exception):
    """Base exception for all search client errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. status_code, raw body).
    """

    kind: ClassVar[ErrorKind | None] = None

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to the kind
                value, or the class name when the class has no kind.
            details: Optional dict of extra context.
        """
        self.message = message
        if error_code is None:
            error_code = self.kind.value if self.kind else self.__class__.__name__
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation for logs or API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class UnreachableServerException(SearchClientException):
    """No HTTP response was obtained from the search server."""

    kind = ErrorKind.UNREACHABLE_SERVER

    def __init__(self, reason: str | None = None) -> None:
        """Initialize with the optional transport failure description.

        Args:
            reason: Text of the underlying transport error, if any.
        """
        self.reason = reason
        super().__init__(
            "The search server can't be reached.",
            details={"reason": reason} if reason else {},
        )


class IndexAlreadyExistsException(SearchClientException):
    """The creation of an index failed because it already exists.

    Use Client.get_or_create_index to reuse an existing index.
    """

    kind = ErrorKind.INDEX_ALREADY_EXIST

    def __init__(self) -> None:
        super().__init__(
            "The creation of an index failed because it already exists."
        )


class IndexNotFoundException(SearchClientException):
    """The requested index does not exist."""

    kind = ErrorKind.INDEX_NOT_FOUND

    def __init__(self) -> None:
        super().__init__("The requested index does not exist.")


class InvalidIndexUidException(SearchClientException):
    """The index UID is invalid.

    Index UIDs can only be composed of alphanumeric characters, hyphens (-)
    and underscores (_).
    """

    kind = ErrorKind.INVALID_INDEX_UID

    def __init__(self) -> None:
        super().__init__(
            "The requested UID is invalid. Index UID can only be composed of "
            "alphanumeric characters, hyphens (-), and underscores (_)."
        )


class CantInferPrimaryKeyException(SearchClientException):
    """The server could not infer the primary key of added documents."""

    kind = ErrorKind.CANT_INFER_PRIMARY_KEY

    def __init__(self) -> None:
        super().__init__(
            "The server was unable to infer the primary key of added documents."
        )


class ServerInMaintenanceException(SearchClientException):
    """The server is in maintenance mode."""

    kind = ErrorKind.SERVER_IN_MAINTENANCE

    def __init__(self) -> None:
        super().__init__("Server is in maintenance, please try again later.")


class HttpException(SearchClientException):
    """The HTTP layer failed after a response status was obtained."""

    kind = ErrorKind.HTTP

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        """Initialize with the transport detail and response status.

        Args:
            detail: Text of the underlying HTTP error.
            status_code: Response status code carried by the error.
        """
        self.detail = detail
        self.status_code = status_code
        super().__init__(
            f"The http request failed: {detail}",
            details={"status_code": status_code, "detail": detail},
        )


class UnknownException(SearchClientException):
    """Anything unrecognized, including response decoding failures.

    ``raw`` holds the original diagnostic text (server body or decoder
    error) verbatim.
    """

    kind = ErrorKind.UNKNOWN

    def __init__(self, raw: str) -> None:
        """Initialize with the unrecognized text.

        Args:
            raw: Original server body or decoding error message.
        """
        self.raw = raw
        super().__init__(
            f"An unknown error occurred. Message: {raw!r}",
            details={"raw": raw},
        )
