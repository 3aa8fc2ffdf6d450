"""
==============================================================================
Output Formatting Module
==============================================================================

Plain-text rendering of weights, catalog lines and lookup results.

Weight Format:
-------------
Shortest positional decimal that round-trips the float32 value, never in
exponent notation, with no trailing ".0":

    1.5   -> "1.5"
    10.0  -> "10"
    1e-07 -> "0.0000001"

==============================================================================
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from product_lookup.catalog.models import Product, ProductInfo


NOT_FOUND_MESSAGE = "Product not found."


def format_weight(weight: float) -> str:
    """Render a weight at single precision in positional notation."""
    return np.format_float_positional(np.float32(weight), unique=True, trim="-")


def format_product_line(product: Product) -> str:
    """Render a catalog record as ``<name>, <weight> <unit>``."""
    return f"{product.name}, {format_weight(product.weight)} {product.unit}"


def format_lookup_result(info: Optional[ProductInfo]) -> str:
    """Render a lookup result, or the not-found message for a miss."""
    if info is None:
        return NOT_FOUND_MESSAGE
    return f"Found: {format_weight(info.weight)} {info.unit}"
