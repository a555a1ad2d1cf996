"""
Named exceptions for the scraper.

The extraction core never raises: misses become the "Not found" sentinel and
normalizers fall back to typed defaults. Everything here belongs to the
edges: configuration, request input and the page transport.
"""


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


class InvalidProductURLError(ValueError):
    """Raised when a product URL is empty or points at an unsupported host."""
    pass


class InvalidResolutionError(ValueError):
    """Raised when an image resolution token is not a <w>/<h> pair."""
    pass


class TransportError(Exception):
    """Base class for failures while fetching a product page."""

    status_code = 500

    def __init__(self, message: str, url: str = ""):
        super().__init__(message)
        self.url = url


class UpstreamUnreachableError(TransportError):
    """DNS failure, refused connection or timeout."""

    status_code = 503


class UpstreamBlockedError(TransportError):
    """The store answered 403."""

    status_code = 403


class UpstreamRateLimitedError(TransportError):
    """The store answered 429."""

    status_code = 429


class UpstreamResponseError(TransportError):
    """Any other non-2xx answer from the store."""

    def __init__(self, message: str, url: str = "", upstream_status: int = 0):
        super().__init__(message, url)
        self.upstream_status = upstream_status


class RetryExhaustedError(UpstreamUnreachableError):
    """Raised when all retry attempts for a fetch are exhausted."""
    pass
