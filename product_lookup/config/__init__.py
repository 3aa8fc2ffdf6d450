"""
==============================================================================
Configuration Package
==============================================================================

Usage:
------
    from product_lookup.config import get_settings

    settings = get_settings()
    print(settings.effective_log_level)

==============================================================================
"""

from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
