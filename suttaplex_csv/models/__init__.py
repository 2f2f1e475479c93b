"""
Data Models Layer.

This package contains the models that define the core data structures used
throughout the application, such as configuration and run results.
"""

from .config import AppConfig
from .results import LookupResult, ReportStats, RunOutcome, RunState

__all__ = ["AppConfig", "LookupResult", "ReportStats", "RunOutcome", "RunState"]
