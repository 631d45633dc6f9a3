"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (dated XML rate feeds)
"""

__all__ = []
