"""Exceptions raised while fetching the books catalog."""
from typing import Optional


class FetchError(Exception):
    """Base class for failures loading a page of books."""

    def __init__(self, message: str, page: Optional[int] = None):
        super().__init__(message)
        self.page = page


class NetworkError(FetchError):
    """Transport failure: timeout, refused connection, DNS, ..."""


class HttpStatusError(FetchError):
    """Backend answered with a non-success status code."""

    def __init__(self, status_code: int, page: Optional[int] = None, body: str = ""):
        super().__init__(f"HTTP {status_code}", page)
        self.status_code = status_code
        self.body = body


class MalformedPayloadError(FetchError):
    """Response body is not the expected books listing."""


class ConfigError(Exception):
    """Required configuration value is missing or invalid."""
