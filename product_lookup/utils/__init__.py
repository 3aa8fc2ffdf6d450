"""
==============================================================================
Utilities Package
==============================================================================

Modules:
--------
- numbers: Single-precision weight parsing and rounding
- formatters: Plain-text rendering of catalog lines and lookup results

==============================================================================
"""
