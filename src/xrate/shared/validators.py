"""
Input Validation Utilities - Configuration Validation

This module provides validation functions for configuration values
so that a bad feed URL is rejected when settings load, not on the first request.

Files that USE this module:
- xrate.config.settings (uses validation functions in Settings field validators)

Files that this module USES:
- None (pure utility functions)
"""
import urllib.parse


def validate_base_url(url: str) -> bool:
    """
    Validate a feed base URL.

    The URL is later used verbatim as a prefix, so only the scheme and
    host are checked; a trailing slash is the caller's responsibility.

    Args:
        url: Base URL to validate

    Returns:
        True if valid, False otherwise
    """
    if not url or url.isspace():
        return False

    parsed = urllib.parse.urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
