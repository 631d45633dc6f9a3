"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from xrate.shared.validators import validate_base_url

__all__ = [
    "validate_base_url",
]
