"""
In-memory CSV table for the per-identifier results.
"""

import csv
import io
from collections.abc import Iterable, Sequence
from typing import Any

HEADER = ["UID", "Author_Available"]


def format_cell(value: Any) -> str:
    """Converts a cell to text. Booleans render in lowercase, None as empty."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def rows_to_csv(rows: Iterable[Sequence[Any]]) -> str:
    """
    Serializes rows to CSV text with every cell quoted.

    Internal quotes are doubled, rows are separated by a bare newline and the
    last row has no trailing line break.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in rows:
        writer.writerow([format_cell(cell) for cell in row])
    return buffer.getvalue().removesuffix("\n")


class CsvTable:
    """Header plus rows appended in processing order."""

    def __init__(self, header: Sequence[str] = HEADER):
        self.header = list(header)
        self._rows: list[list[Any]] = []

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> list[list[Any]]:
        """All rows, header first."""
        return [self.header, *self._rows]

    def append(self, uid: str, author_available: bool) -> None:
        self._rows.append([uid, author_available])

    def to_csv(self) -> str:
        return rows_to_csv(self.rows)
