"""
Data Catalog.

This package provides the book collections and author identifiers offered for
selection, either built in or loaded from a JSON file.
"""

from .loader import Catalog, default_catalog, load_catalog

__all__ = ["Catalog", "default_catalog", "load_catalog"]
