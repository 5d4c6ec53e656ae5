# bgg_wrapped/errors.py
from typing import Optional

from bgg_wrapped.schemas.wrapped import ErrorKind, PipelineError


class FetchError(Exception):
    """Terminal failure while acquiring a collection export."""

    kind: ErrorKind = ErrorKind.UNEXPECTED
    default_message = "An error occurred. Please try again."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_error(self) -> PipelineError:
        return PipelineError(kind=self.kind, message=self.message)


class EmptyUsername(FetchError):
    kind = ErrorKind.EMPTY_USERNAME
    default_message = "Please enter a BGG username"


class TransportError(FetchError):
    kind = ErrorKind.TRANSPORT_ERROR
    default_message = (
        "Failed to fetch collection data. "
        "Make sure the username is correct and the collection is public."
    )

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ExportTimeout(FetchError):
    kind = ErrorKind.EXPORT_TIMEOUT
    default_message = (
        "BGG is taking longer than expected to process your collection. "
        "Please try again in a minute."
    )


class UpstreamRejected(FetchError):
    kind = ErrorKind.UPSTREAM_REJECTED
    default_message = "Invalid username or private collection"


class EmptyCollection(FetchError):
    kind = ErrorKind.EMPTY_COLLECTION
    default_message = (
        "No games found in collection. "
        "Make sure your collection is public and has games in it."
    )


def unexpected_error() -> PipelineError:
    return PipelineError(kind=ErrorKind.UNEXPECTED, message=FetchError.default_message)
