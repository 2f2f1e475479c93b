"""
Core application engine.

The `TranslationReportBuilder` drives one report run: it walks a collection
in order, asks the lookup about each identifier, and fills a `CsvTable`.
"""

from .csv_table import CsvTable, rows_to_csv
from .report_builder import TranslationReportBuilder

__all__ = ["CsvTable", "TranslationReportBuilder", "rows_to_csv"]
