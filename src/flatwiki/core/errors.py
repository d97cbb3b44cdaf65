"""Error hierarchy for wiki operations.

Each error carries the HTTP status the global handlers answer with; the
message is returned to the client verbatim as the plain-text body.
"""

from fastapi import status


class WikiError(Exception):
    """Base exception for all wiki errors."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PageNotFoundError(WikiError):
    """A page could not be loaded (missing, unreadable, or not a file)."""

    http_status = status.HTTP_404_NOT_FOUND

    def __init__(self, title: str):
        super().__init__(f"page not found: {title}")
        self.title = title


class InvalidTitleError(WikiError):
    """A title failed identifier validation."""

    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, title: str, reason: str):
        super().__init__(f"invalid title {title!r}: {reason}")
        self.title = title
        self.reason = reason


class StorageError(WikiError):
    """Persisting or deleting a page failed."""

    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, title: str, cause: OSError):
        super().__init__(str(cause))
        self.title = title
        self.cause = cause
