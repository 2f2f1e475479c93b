"""
Storage Layer.

This package handles everything written to disk: the configuration file and
the finished CSV reports.
"""

from .config_manager import ConfigManager
from .exporter import CsvExporter

__all__ = ["ConfigManager", "CsvExporter"]
