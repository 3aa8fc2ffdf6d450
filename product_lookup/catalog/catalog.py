"""
==============================================================================
Product Catalog Module
==============================================================================

In-memory product catalog with case-insensitive name lookup.

Features:
---------
- Insertion-ordered record storage, append only
- Exact name matching with ASCII-only case folding
- First match wins when names repeat

Matching Policy:
---------------
Only the ASCII letters A-Z / a-z are folded. Every other character,
including non-ASCII letters such as "É" and "é", must be identical.
Whitespace inside a name is significant.

==============================================================================
"""

from __future__ import annotations

import logging
import string
from typing import Iterator, List, Optional

from .models import Product, ProductInfo


# Module logger
logger = logging.getLogger(__name__)


_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class ProductCatalog:
    """
    Ordered, append-only collection of product records.

    The catalog owns its record list; callers only ever receive copies
    of it or the (immutable) records themselves.

    Example:
        >>> catalog = ProductCatalog()
        >>> catalog.append(Product(name="Apple", weight=0.2, unit="kg"))
        >>> catalog.lookup("APPLE").unit
        'kg'
        >>> catalog.lookup("Pear") is None
        True
    """

    def __init__(self) -> None:
        self._products: List[Product] = []

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> List[Product]:
        """Get all products."""
        return self._products.copy()

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return self.iterate()

    # =========================================================================
    # MUTATION
    # =========================================================================

    def append(self, product: Product) -> None:
        """Add a record at the end of the catalog."""
        self._products.append(product)
        logger.debug(f"Appended product {product.name!r} ({len(self._products)} total)")

    # =========================================================================
    # MATCHING (Static Methods)
    # =========================================================================

    @staticmethod
    def names_match(stored_name: str, query: str) -> bool:
        """
        Compare two names under case-insensitive ASCII equality.

        Args:
            stored_name: Name of a catalog record
            query: Search term

        Returns:
            True if the names are equal once ASCII letters are folded

        Example:
            >>> ProductCatalog.names_match("Banana", "bAnAnA")
            True
            >>> ProductCatalog.names_match("Éclair", "éclair")
            False
        """
        if len(stored_name) != len(query):
            return False
        return stored_name.translate(_ASCII_FOLD) == query.translate(_ASCII_FOLD)

    # =========================================================================
    # SEARCH METHODS
    # =========================================================================

    def iterate(self) -> Iterator[Product]:
        """Yield each record in insertion order."""
        yield from self.products

    def find_by_name(self, query: str) -> Optional[Product]:
        """Find the first product whose name matches the query."""
        for product in self._products:
            if self.names_match(product.name, query):
                return product
        return None

    def lookup(self, query: str) -> Optional[ProductInfo]:
        """
        Look up a product's weight and unit by name.

        Args:
            query: Search term, matched exactly apart from ASCII case

        Returns:
            ProductInfo copied from the earliest matching record, or None
        """
        product = self.find_by_name(query)
        if product is None:
            logger.debug(f"Lookup miss: {query!r}")
            return None

        logger.debug(f"Lookup hit: {query!r} → {product.name!r}")
        return ProductInfo.from_product(product)
