"""Exceptions raised while resolving a Reddit post reference."""

from typing import Optional


class ResolutionError(Exception):
    """Base class for every failure of a single resolution request."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class DecodeError(ResolutionError):
    """The response body was not JSON of the expected shape."""

    def __init__(self, message: str, expected: str = "api response"):
        self.expected = expected
        super().__init__(f"could not decode {expected}: {message}")


class UnexpectedShape(ResolutionError):
    """The decoded response did not hold a listing wrapping a post."""

    def __init__(self, expected: str, got: str):
        self.expected = expected
        self.got = got
        super().__init__(f"unexpected response shape: expected {expected}, got {got}")


class TransportError(ResolutionError):
    """Network-level failure (connection, DNS, TLS, read)."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"request to {url} failed: {message}")


class RedirectWithoutLocation(ResolutionError):
    """A 3xx response arrived without a location header."""

    def __init__(self, url: str, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"redirect ({status_code}) from {url} has no location header")


class TooManyRedirects(ResolutionError):
    """The redirect loop guard tripped."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"gave up after {count} redirects")


class CrossPostLimitExceeded(ResolutionError):
    """The cross-post loop guard tripped."""

    def __init__(self, hops: int):
        self.hops = hops
        super().__init__(f"gave up after following {hops} cross-posts")
