"""
SuttaCentral API Layer.

This package handles all communication with the SuttaCentral JSON API and the
pacing applied between requests.
"""

from .client import SuttaCentralClient, author_exists_in_translations
from .pacer import FixedPacer

__all__ = ["FixedPacer", "SuttaCentralClient", "author_exists_in_translations"]
