"""
Writes finished CSV reports to disk.
"""

import logging
from pathlib import Path

from suttaplex_csv.exceptions import ExportError
from suttaplex_csv.utils.path import create_dir

log = logging.getLogger(__name__)


class CsvExporter:
    """Saves CSV text under a given file name inside one output directory."""

    def __init__(self, output_dir: Path):
        self.output_dir = output_dir

    def save(self, csv_text: str, filename: str) -> Path:
        """
        Writes the report as UTF-8, replacing any existing file of that name.

        Raises:
            ExportError: If the directory or file cannot be written.
        """
        target = self.output_dir / filename
        try:
            create_dir(self.output_dir)
            with open(target, "w", encoding="utf-8", newline="") as f:
                f.write(csv_text)
        except OSError as e:
            raise ExportError(f"Failed to write '{target}': {e}") from e
        log.debug(f"Wrote {len(csv_text)} characters to {target}")
        return target
