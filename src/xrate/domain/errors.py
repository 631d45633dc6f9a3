"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions raised while reading the
historical rate feed. Every feed error keeps the underlying library
exception as its __cause__.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class RateFeedError(DomainError):
    """Base exception for failures while reading a dated rate feed."""
    pass


class FeedFetchError(RateFeedError):
    """Raised when the feed URL cannot be retrieved (network error, HTTP error status, timeout)."""
    pass


class FeedParseError(RateFeedError):
    """Raised when the feed body is not well-formed XML."""
    pass


class FeedSchemaError(RateFeedError):
    """Raised when an fx node does not have the expected code/rate children."""
    pass
