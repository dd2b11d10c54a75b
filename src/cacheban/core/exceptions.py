"""Exceptions raised by cacheban."""

from typing import Any


class CacheBanError(Exception):
    """Base class for all cacheban errors."""

    pass


class InvalidUrlError(CacheBanError, ValueError):
    """Raised when a URL cannot be split into path components."""

    def __init__(self, url: Any, reason: str | None = None) -> None:
        self.url = url
        message = f"Invalid URL {url!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidConfigError(CacheBanError, ValueError):
    """Raised when the cache server target cannot be built."""

    pass


class FlushInProgressError(CacheBanError, RuntimeError):
    """Raised by a non-waiting flush while another flush is running."""

    pass


class BanTransportError(CacheBanError):
    """Raised by transports when a ban request could not be delivered.

    Attributes:
        request: The request that failed, if known.
    """

    def __init__(self, message: str, request: Any = None) -> None:
        super().__init__(message)
        self.request = request
