"""
Pydantic model and loading helpers for the book catalog.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from suttaplex_csv.exceptions import CatalogError

from .data import AUTHORS, BOOKS

log = logging.getLogger(__name__)


class Catalog(BaseModel):
    """Collection keys mapped to ordered identifier lists, plus known authors."""

    books: dict[str, list[str]]
    authors: list[str]

    @field_validator("books")
    @classmethod
    def validate_books(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        """Rejects blank collection keys and blank identifiers."""
        for key, uids in v.items():
            if not key.strip():
                raise ValueError("Collection keys cannot be empty.")
            if any(not uid.strip() for uid in uids):
                raise ValueError(f"Collection '{key}' contains an empty identifier.")
        return v

    @field_validator("authors")
    @classmethod
    def validate_authors(cls, v: list[str]) -> list[str]:
        if any(not author.strip() for author in v):
            raise ValueError("Author identifiers cannot be empty.")
        return v

    @property
    def collections(self) -> list[str]:
        return list(self.books)

    def uids_for(self, collection: str) -> list[str] | None:
        """Returns the identifiers of a collection, or None if it is unknown."""
        return self.books.get(collection)


def default_catalog() -> Catalog:
    """Returns the catalog bundled with the package."""
    return Catalog(books=BOOKS, authors=AUTHORS)


def load_catalog(path: Path | None = None) -> Catalog:
    """
    Loads a catalog from a JSON file, or the built-in one if no path is given.

    The file must hold an object with a ``books`` mapping and an ``authors`` list.

    Raises:
        CatalogError: If the file cannot be read, parsed, or validated.
    """
    if path is None:
        return default_catalog()

    if not path.is_file():
        raise CatalogError(f"Catalog file not found at '{path}'.")

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw: Any = json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError(f"Could not read catalog file '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Catalog file '{path}' is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise CatalogError(
            f"Catalog file '{path}' must contain an object with 'books' and 'authors'."
        )

    try:
        catalog = Catalog(**raw)
    except ValidationError as e:
        raise CatalogError(f"Catalog validation failed:\n{e}") from e

    log.debug(
        f"Loaded catalog from {path}: {len(catalog.books)} collections, "
        f"{len(catalog.authors)} authors."
    )
    return catalog
