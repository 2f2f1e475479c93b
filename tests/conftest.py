"""Shared test configuration utilities and fixtures."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from suttaplex_csv.catalog import Catalog


def make_response(status: int = 200, json_data: Any = None, json_error: Exception | None = None):
    """Builds a mock aiohttp response usable as ``async with session.get(...)``."""
    response = MagicMock()
    response.status = status
    if json_error is not None:
        response.json = AsyncMock(side_effect=json_error)
    else:
        response.json = AsyncMock(return_value=json_data)

    request_ctx = MagicMock()
    request_ctx.__aenter__.return_value = response
    return request_ctx


def make_session(*responses):
    """
    Mock ClientSession whose ``get`` yields the given responses in order.

    Exceptions in ``responses`` are raised by ``get`` instead.
    """
    session = MagicMock()
    session.closed = False
    session.close = AsyncMock()
    session.get.side_effect = list(responses)
    return session


def suttaplex_body(*author_uids: str) -> list[dict[str, Any]]:
    return [{"uid": "x", "translations": [{"author_uid": a, "lang": "en"} for a in author_uids]}]


class RecordingView:
    """In-memory stand-in for the Rich presentation layer."""

    def __init__(self):
        self.events: list[tuple] = []
        self.status = ""
        self.severity = ""
        self.busy = False

    def set_status(self, message: str, severity: str = "") -> None:
        self.status = message
        self.severity = severity
        self.events.append(("status", message, severity))

    def set_progress(self, current: int, total: int) -> None:
        self.events.append(("progress", current, total))

    def set_busy(self, busy: bool) -> None:
        self.busy = busy
        self.events.append(("busy", busy))


@pytest.fixture
def catalog() -> Catalog:
    return Catalog(
        books={"mn": ["mn1", "mn2"], "dn": ["dn1", "dn2", "dn3"]},
        authors=["sujato", "bodhi"],
    )


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()
