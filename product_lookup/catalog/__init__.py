"""
==============================================================================
Catalog Package - Product Records
==============================================================================

In-memory product catalog with case-insensitive name lookup.

Classes:
--------
- Product: Pydantic model for catalog records
- ProductInfo: Weight and unit returned by a lookup
- ProductCatalog: Append-only catalog with lookup

==============================================================================
"""

from .models import Product, ProductInfo
from .catalog import ProductCatalog

__all__ = [
    "Product",
    "ProductInfo",
    "ProductCatalog",
]
