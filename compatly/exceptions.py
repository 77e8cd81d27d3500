"""Exception types for pycompatly."""

from __future__ import annotations


class CompatlyError(Exception):
    """Base exception for expected application errors."""


class NetworkError(CompatlyError):
    """Raised when a network operation fails."""

    def __init__(self, url: str, *, cause: str | None = None) -> None:
        detail = f"Unable to connect to {url}"
        if cause:
            detail = f"{detail} ({cause})"
        super().__init__(detail)


class RequestTimeoutError(CompatlyError):
    """Raised when a request times out."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Request timed out for {url}")


class HttpStatusError(CompatlyError):
    """Raised when a non-200 HTTP response is returned."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"Request failed with HTTP {status_code} for {url}")


class ContentError(CompatlyError):
    """Raised when a response body is invalid or unexpectedly empty."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Received empty or invalid content from {url}")


class DatasetError(CompatlyError):
    """Raised when a feature dataset cannot be read or has the wrong shape."""

    def __init__(self, source: str, *, reason: str) -> None:
        self.source = source
        super().__init__(f"Invalid feature dataset from {source}: {reason}")


class InputInvalidError(CompatlyError):
    """Raised at the boundary when stylesheet input is missing or unusable."""
