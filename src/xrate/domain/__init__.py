"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from xrate.domain.models import (
    DEFAULT_RATE,
    DateKey,
    ExchangeRateNode,
)
from xrate.domain.errors import (
    DomainError,
    FeedFetchError,
    FeedParseError,
    FeedSchemaError,
    RateFeedError,
)

__all__ = [
    "DEFAULT_RATE",
    "DateKey",
    "ExchangeRateNode",
    "DomainError",
    "RateFeedError",
    "FeedFetchError",
    "FeedParseError",
    "FeedSchemaError",
]
