"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class SuttaplexCsvError(Exception):
    """Base exception for all application-specific errors."""


class ConfigurationError(SuttaplexCsvError):
    """Raised for issues related to configuration loading or validation."""


class CatalogError(SuttaplexCsvError):
    """Raised when a book catalog file is missing, unreadable, or malformed."""


class ExportError(SuttaplexCsvError):
    """Raised when the finished CSV cannot be written to disk."""
