"""
Async client for the SuttaCentral suttaplex endpoint.
"""

import asyncio
import logging
from typing import Any, Optional

import aiohttp
from rich.markup import escape

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://suttacentral.net/api"


def author_exists_in_translations(translations: Any, target_author: str) -> bool:
    """
    Checks whether any translation entry was made by the target author.

    The comparison on ``author_uid`` is exact but ignores case. Anything that
    is not a list of translation mappings yields False.
    """
    if not translations or not isinstance(translations, list):
        return False
    target = target_author.lower()
    return any(
        isinstance(translation, dict)
        and isinstance(translation.get("author_uid"), str)
        and translation["author_uid"].lower() == target
        for translation in translations
    )


class SuttaCentralClient:
    """
    Minimal async client for ``GET {base_url}/suttaplex/{uid}``.

    Every failure (network, HTTP status, malformed JSON) is logged and
    reported to the caller as a missing response, never as an exception.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = 30):
        """
        Initializes the API client.

        Args:
            base_url: Root of the SuttaCentral API, without a trailing slash.
            timeout: Total timeout in seconds for a single request.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    async def _initialize_session(self) -> None:
        """Ensures an active aiohttp session is available."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers={
                    "Accept": "application/json",
                    "Accept-Encoding": "gzip, deflate",
                },
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )

    async def close(self) -> None:
        """Gracefully closes the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "SuttaCentralClient":
        await self._initialize_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def suttaplex_url(self, uid: str) -> str:
        return f"{self.base_url}/suttaplex/{uid}"

    async def fetch_suttaplex(self, uid: str) -> Optional[Any]:
        """
        Fetches the suttaplex record for a single identifier.

        Returns:
            The decoded JSON body, or None if the request failed for any reason.
        """
        await self._initialize_session()
        url = self.suttaplex_url(uid)
        try:
            async with self._session.get(url) as r:
                if not 200 <= r.status < 300:
                    log.warning(
                        f"[yellow]Error fetching data for {uid}: "
                        f"HTTP status {r.status}[/yellow]"
                    )
                    return None
                return await r.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            log.warning(f"[yellow]Error fetching data for {uid}:[/yellow] {escape(str(e))}")
            log.debug(f"Request to {url} failed.", exc_info=True)
            return None

    async def author_available(self, uid: str, author: str) -> bool:
        """
        Reports whether a translation by ``author`` exists for ``uid``.

        Fails open: a failed lookup or an unexpected response shape is False.
        """
        data = await self.fetch_suttaplex(uid)
        if not isinstance(data, list) or not data:
            return False
        first = data[0]
        if not isinstance(first, dict):
            log.debug(f"Unexpected suttaplex entry for {uid}: {type(first).__name__}")
            return False
        return author_exists_in_translations(first.get("translations"), author)
