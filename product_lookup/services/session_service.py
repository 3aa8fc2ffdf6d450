"""
==============================================================================
Session Service Module
==============================================================================

Interactive driver for a single product-lookup session.

Session Script:
--------------
1. Read one product record (name, weight, unit) and append it
2. Print the catalog under a "Current Products:" banner
3. Read a search name, look it up and print the result

Any fatal input error ends the session early by propagating an
AppException; a lookup miss is reported as normal output.

==============================================================================
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from product_lookup.catalog import Product, ProductCatalog, ProductInfo
from product_lookup.console import InputReader
from product_lookup.core.exceptions import invalid_weight
from product_lookup.utils.formatters import (
    format_lookup_result,
    format_product_line,
)


# Module logger
logger = logging.getLogger(__name__)


# =============================================================================
# OPERATOR-FACING TEXT
# =============================================================================

NAME_PROMPT = "Please enter the name of the product:"
WEIGHT_PROMPT = "Please enter the weight of the product:"
UNIT_PROMPT = "Please enter the unit of the product:"
SEARCH_PROMPT = "Enter product name to search:"
CATALOG_BANNER = "Current Products:"


class ProductSession:
    """
    One-shot interactive session over a product catalog.

    Attributes:
        _reader: InputReader used for every prompt
        _catalog: Catalog owned by this session
        _output: Stream results are printed to

    Example:
        >>> session = ProductSession(InputReader())
        >>> info = session.run()
    """

    def __init__(
        self,
        reader: InputReader,
        catalog: Optional[ProductCatalog] = None,
        output: Optional[TextIO] = None
    ) -> None:
        self._reader = reader
        self._catalog = catalog if catalog is not None else ProductCatalog()
        self._output = output if output is not None else sys.stdout

    @property
    def catalog(self) -> ProductCatalog:
        return self._catalog

    # =========================================================================
    # SESSION FLOW
    # =========================================================================

    def run(self) -> Optional[ProductInfo]:
        """
        Run the full session script once.

        Returns:
            The lookup result, or None when the search name was not found

        Raises:
            AppException: On a failed read or a malformed weight
        """
        logger.debug("Session started")

        self.add_product()
        self.print_catalog()
        info = self.search()

        logger.debug("Session finished")
        return info

    def add_product(self) -> Product:
        """Prompt for one record and append it to the catalog."""
        name = self._reader.read_input(NAME_PROMPT)
        weight = self._reader.read_number(WEIGHT_PROMPT, error=invalid_weight, minimum=0)
        unit = self._reader.read_input(UNIT_PROMPT)

        product = Product(name=name, weight=weight, unit=unit)
        self._catalog.append(product)
        return product

    def print_catalog(self) -> None:
        """Print the banner followed by one line per record."""
        self._print()
        self._print(CATALOG_BANNER)
        for product in self._catalog.iterate():
            self._print(format_product_line(product))

    def search(self) -> Optional[ProductInfo]:
        """Prompt for a name, look it up and print the outcome."""
        self._print()
        query = self._reader.read_input(SEARCH_PROMPT)

        info = self._catalog.lookup(query)
        self._print(format_lookup_result(info))
        return info

    def _print(self, text: str = "") -> None:
        print(text, file=self._output, flush=True)
