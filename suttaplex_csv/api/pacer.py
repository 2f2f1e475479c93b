"""
Provides the fixed delay applied between consecutive suttaplex requests.
"""

import asyncio
import logging

log = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 100


class FixedPacer:
    """
    Sleeps for the same interval after every item, whatever the outcome.

    The interval is not adapted to server feedback.
    """

    def __init__(self, delay_ms: int = DEFAULT_DELAY_MS):
        """
        Initializes the pacer.

        Args:
            delay_ms: Pause after each item, in milliseconds. Zero disables pacing.
        """
        if delay_ms < 0:
            raise ValueError("Pacing delay cannot be negative.")
        self.delay_ms = delay_ms

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000

    async def wait(self) -> None:
        """Suspends the current task for the configured interval."""
        if self.delay_ms:
            await asyncio.sleep(self.delay_seconds)
