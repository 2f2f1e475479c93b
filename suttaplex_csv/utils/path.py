"""
Utilities for handling output file names and directories.
"""

from pathlib import Path

from pathvalidate import sanitize_filename


def build_report_filename(collection: str, author: str) -> str:
    """Returns ``{collection}_{author}_translations.csv``, made safe for any OS."""
    return sanitize_filename(f"{collection}_{author}_translations.csv", platform="auto")


def create_dir(directory_path: Path) -> None:
    """Creates a directory if it does not already exist."""
    directory_path.mkdir(parents=True, exist_ok=True)
