"""
Rich-based status line and progress bar for report runs.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

from suttaplex_csv.utils.formatting import progress_percentage, progress_text

SEVERITY_STYLES = {
    "": "",
    "error": "bold red",
    "loading": "cyan",
    "success": "bold green",
}


class ProgressManager:
    """
    The presentation side of a run: a status message with a severity and a
    progress bar that is only visible while the run is busy.
    """

    def __init__(self, console: Console):
        self.console = console

        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}", justify="left"),
            BarColumn(bar_width=40),
            "[progress.percentage]{task.percentage:>3.0f}%",
            "•",
            TimeElapsedColumn(),
            console=console,
            transient=True,
        )

        self.status = ""
        self.severity = ""
        self.percentage = 0.0
        self.progress_text = ""
        self.busy = False
        self._task_id: TaskID | None = None

    def set_status(self, message: str, severity: str = "") -> None:
        """Shows a status message styled by severity ('', error, loading, success)."""
        if severity not in SEVERITY_STYLES:
            raise ValueError(f"Unknown status severity: {severity!r}")
        self.status = message
        self.severity = severity
        self.console.print(Text(message, style=SEVERITY_STYLES[severity]))

    def set_progress(self, current: int, total: int) -> None:
        self.percentage = progress_percentage(current, total)
        self.progress_text = progress_text(current, total)
        if self._task_id is not None:
            self.progress.update(
                self._task_id,
                description=self.progress_text,
                total=total,
                completed=current,
            )

    def set_busy(self, busy: bool) -> None:
        """Shows the progress bar while busy and removes it afterwards."""
        if busy == self.busy:
            return
        self.busy = busy
        if busy:
            self.percentage = 0.0
            self.progress_text = ""
            self._task_id = self.progress.add_task("Starting...", total=None)
            self.progress.start()
        else:
            self.progress.stop()
            if self._task_id is not None:
                self.progress.remove_task(self._task_id)
                self._task_id = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.set_busy(False)
