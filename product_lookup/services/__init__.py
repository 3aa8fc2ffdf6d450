"""
==============================================================================
Services Package
==============================================================================

Modules:
--------
- session_service: Interactive add / list / search session

==============================================================================
"""

from .session_service import ProductSession

__all__ = [
    "ProductSession",
]
