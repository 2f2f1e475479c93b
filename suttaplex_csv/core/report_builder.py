"""
The orchestrator that turns a (collection, author) selection into a CSV report.
"""

import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from rich.markup import escape

from suttaplex_csv.api.pacer import FixedPacer
from suttaplex_csv.catalog import Catalog
from suttaplex_csv.models.results import (
    LookupResult,
    ReportStats,
    RunOutcome,
    RunState,
)
from suttaplex_csv.utils.path import build_report_filename

from .csv_table import CsvTable

log = logging.getLogger(__name__)

SELECT_PROMPT_MESSAGE = "Select a book collection and author to begin."
SELECTION_REQUIRED_MESSAGE = "Please select both a book collection and an author."
PROCESSING_MESSAGE = "Processing suttas..."
FAILURE_MESSAGE = "An error occurred while building the CSV. Please try again."


class AuthorLookup(Protocol):
    async def author_available(self, uid: str, author: str) -> bool: ...


class ReportView(Protocol):
    """What the orchestrator needs from the presentation layer."""

    def set_status(self, message: str, severity: str = "") -> None: ...

    def set_progress(self, current: int, total: int) -> None: ...

    def set_busy(self, busy: bool) -> None: ...


def success_message(filename: str) -> str:
    return f'CSV file "{filename}" has been downloaded successfully!'


class TranslationReportBuilder:
    """
    Runs one report at a time: validates the selection, looks up every
    identifier of the collection in order, then saves the CSV.

    Lookups are strictly sequential and followed by the pacer's delay. Any
    error escaping the loop or the save discards the partial table.
    """

    def __init__(
        self,
        catalog: Catalog,
        lookup: AuthorLookup,
        view: ReportView,
        saver: Callable[[str, str], Path],
        pacer: FixedPacer | None = None,
    ):
        """
        Args:
            catalog: Source of collection identifiers.
            lookup: Object answering whether an author translated a given uid.
            view: Receives status, progress and busy-state updates.
            saver: Called with (csv_text, filename); returns the written path.
            pacer: Delay policy between items. Defaults to the standard 100 ms.
        """
        self.catalog = catalog
        self.lookup = lookup
        self.view = view
        self.saver = saver
        self.pacer = pacer or FixedPacer()
        self.state = RunState.IDLE

    def _reject(self, message: str, collection: str, author: str) -> RunOutcome:
        self.view.set_status(message, "error")
        return RunOutcome(
            state=RunState.IDLE,
            message=message,
            collection=collection,
            author=author,
        )

    async def build(self, collection: str, author: str) -> RunOutcome:
        """Processes a whole collection for one author and saves the report."""
        collection = (collection or "").strip()
        author = (author or "").strip()

        if not collection or not author:
            return self._reject(SELECTION_REQUIRED_MESSAGE, collection, author)

        uids = self.catalog.uids_for(collection)
        if uids is None:
            return self._reject(
                f"Unknown book collection '{collection}'.", collection, author
            )

        table = CsvTable()
        stats = ReportStats(items_total=len(uids))
        results: list[LookupResult] = []
        outcome = RunOutcome(
            state=RunState.RUNNING,
            message=PROCESSING_MESSAGE,
            collection=collection,
            author=author,
            stats=stats,
        )

        self.state = RunState.RUNNING
        self.view.set_busy(True)
        self.view.set_status(PROCESSING_MESSAGE, "loading")
        log.info(
            f"Checking {len(uids)} suttas in [cyan]{collection}[/cyan] "
            f"for author [cyan]{author}[/cyan]"
        )
        start_time = time.monotonic()

        try:
            for index, uid in enumerate(uids, 1):
                available = await self.lookup.author_available(uid, author)
                result = LookupResult(uid=uid, author_available=available)
                table.append(result.uid, result.author_available)
                results.append(result)
                stats.record(result)
                self.view.set_progress(index, len(uids))
                log.debug(f"{uid}: author_available={available}")
                await self.pacer.wait()

            csv_text = table.to_csv()
            filename = build_report_filename(collection, author)
            output_path = self.saver(csv_text, filename)

            outcome.state = RunState.SUCCESS
            outcome.message = success_message(filename)
            outcome.filename = filename
            outcome.output_path = output_path
            outcome.csv_text = csv_text
            outcome.results = results
            self.view.set_status(outcome.message, "success")
        except Exception as e:
            log.error(f"[red]Error building CSV: {escape(str(e))}[/red]")
            log.debug("Full traceback:", exc_info=True)
            outcome.state = RunState.FAILED
            outcome.message = FAILURE_MESSAGE
            self.view.set_status(FAILURE_MESSAGE, "error")
        finally:
            outcome.duration_s = time.monotonic() - start_time
            self.state = RunState.IDLE
            self.view.set_busy(False)

        return outcome
