"""Content provider exceptions."""

from __future__ import annotations

from typing import Optional, Union


class ProviderError(Exception):
    """Base exception for content provider errors."""

    def __init__(self, message: str, code: str = "PROVIDER_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class NetworkFailure(ProviderError):
    """Transport failure or a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message, code="NETWORK_FAILURE")


class NotFound(ProviderError):
    """The provider has no series with the requested id."""

    def __init__(self, message: str = "Series not found", series_id: str = ""):
        self.series_id = series_id
        super().__init__(message, code="NOT_FOUND")


class MalformedResponse(ProviderError):
    """Response body is not JSON or not the expected shape."""

    def __init__(self, message: str):
        super().__init__(message, code="MALFORMED_RESPONSE")


class ChapterNotFound(ProviderError):
    """The series resolved but has no chapter with the requested number."""

    def __init__(self, series_id: str, number: Union[int, str, None]):
        self.series_id = series_id
        self.number = number
        super().__init__(
            f"Chapter {number} not found in '{series_id}'",
            code="CHAPTER_NOT_FOUND",
        )
