"""Catalog search: fuzzy weighted ranking of product catalog items."""

__version__ = "0.1.0"
