"""DuckDuckGo HTML search and page fetch over a shared HTTP client."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from loguru import logger

from duckscout.agent.tools.websearch.models import SearchHit
from duckscout.agent.tools.websearch.parser import extract_results
from duckscout.agent.tools.websearch.sanitizer import sanitize_html

if TYPE_CHECKING:
    from duckscout.config.schema import WebToolsConfig

FETCH_TIMEOUT_MESSAGE = "Error: The request timed out while trying to fetch the webpage."


class SearchFailure(Exception):
    """Raised when the search request or result extraction fails."""


class DuckDuckGoClient:
    """
    Issue search and fetch requests through one pooled ``httpx.AsyncClient``.

    The underlying client is created lazily unless one is injected; an
    injected client is left open on ``aclose``.
    """

    def __init__(
        self,
        config: WebToolsConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        from duckscout.config.schema import WebToolsConfig

        self.config = config or WebToolsConfig()
        self._http = http_client
        self._owns_http = http_client is None

    @property
    def http(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(
                headers=self._headers(),
                timeout=self.config.timeout,
                follow_redirects=True,
            )
        return self._http

    async def search(self, *, query: str, max_results: int) -> list[SearchHit]:
        """POST the query to the HTML endpoint and extract hits."""
        endpoint = self.config.search.endpoint
        logger.debug("Searching {} for {!r} (max {})", endpoint, query, max_results)
        try:
            response = await self.http.post(
                endpoint,
                data={"q": query, "b": "", "kl": ""},
                headers=self._headers(),
                timeout=self.config.timeout,
            )
            response.raise_for_status()
            hits = extract_results(response.text, max_results)
        except Exception as e:
            raise SearchFailure(f"Search request failed: {e}") from e

        logger.debug("Extracted {} hits for {!r}", len(hits), query)
        return hits

    async def fetch_content(self, url: str) -> str:
        """GET a page and return its sanitized text, or an error description."""
        logger.debug("Fetching {}", url)
        try:
            response = await self.http.get(
                url,
                headers=self._headers(),
                timeout=self.config.timeout,
            )
            response.raise_for_status()
            return sanitize_html(response.text, self.config.fetch.max_chars)
        except httpx.TimeoutException:
            logger.warning("Timed out fetching {}", url)
            return FETCH_TIMEOUT_MESSAGE
        except httpx.HTTPError as e:
            logger.warning("Could not access {}: {}", url, e)
            return f"Error: Could not access the webpage ({e})"
        except Exception as e:
            logger.warning("Unexpected error fetching {}: {}", url, e)
            return f"Error: An unexpected error occurred while fetching the webpage ({e})"

    async def aclose(self) -> None:
        if self._http is not None and self._owns_http:
            await self._http.aclose()
            self._http = None

    async def __aenter__(self) -> DuckDuckGoClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def _headers(self) -> dict[str, str]:
        return {"User-Agent": self.config.user_agent}
