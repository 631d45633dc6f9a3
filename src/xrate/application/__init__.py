"""
Application Layer - Use Cases and Services

This package contains application services that orchestrate domain logic.
No direct I/O - uses adapters through interfaces.
"""

from xrate.application.rates_service import RatesService

__all__ = [
    "RatesService",
]
