"""
Product Lookup

Interactive command-line tool: enter one product, list the catalog, then
search it by name.
"""

__version__ = "1.0.0"
