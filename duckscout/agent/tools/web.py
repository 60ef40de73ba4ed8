"""Web tools: DuckDuckGo search and page fetch."""

from __future__ import annotations

from typing import Any

from loguru import logger

from duckscout.agent.tools.base import Tool
from duckscout.agent.tools.websearch.client import DuckDuckGoClient
from duckscout.agent.tools.websearch.models import SearchHit
from duckscout.agent.tools.websearch.ratelimit import RateLimiter

NO_RESULTS_MESSAGE = (
    "No results were found for your search query. This could be due to "
    "DuckDuckGo's bot detection or the query returned no matches. Please try "
    "rephrasing your search or try again in a few minutes."
)


def format_results(hits: list[SearchHit]) -> str:
    """Render hits as a numbered list for an LLM consumer."""
    if not hits:
        return NO_RESULTS_MESSAGE

    lines = [f"Found {len(hits)} search results:\n"]
    for hit in hits:
        lines.append(f"{hit.position}. {hit.title}")
        lines.append(f"   URL: {hit.url}")
        lines.append(f"   Summary: {hit.snippet}")
        lines.append("")
    return "\n".join(lines)


def _acquire_timeout(client: DuckDuckGoClient) -> float | None:
    return client.config.acquire_timeout or None


class WebSearchTool(Tool):
    """Search DuckDuckGo's HTML interface."""

    name = "web_search"
    description = (
        "Search DuckDuckGo and return formatted results including titles, URLs, "
        "and snippets. Use this when you need to find current information on the web."
    )
    parameters = {
        "type": "object",
        "properties": {
            "query": {"type": "string", "minLength": 1, "description": "The search query string"},
            "maxResults": {
                "type": "integer",
                "minimum": 1,
                "description": "Maximum number of results to return (default: 10)",
            },
        },
        "required": ["query"],
    }

    def __init__(self, client: DuckDuckGoClient, limiter: RateLimiter | None = None):
        self.client = client
        self.limiter = limiter or RateLimiter(client.config.search.requests_per_minute)

    async def execute(self, query: str, **kwargs: Any) -> str:
        try:
            if not query or not query.strip():
                raise ValueError("query must not be empty")
            max_results = kwargs.get("maxResults")
            if max_results is None:
                max_results = self.client.config.search.max_results
            if max_results < 1:
                raise ValueError("maxResults must be >= 1")

            await self.limiter.acquire(timeout=_acquire_timeout(self.client))
            hits = await self.client.search(query=query, max_results=max_results)
            return format_results(hits)
        except Exception as e:
            logger.warning("web_search failed for {!r}: {}", query, e)
            return f"An error occurred while searching: {e}"


class WebFetchTool(Tool):
    """Fetch a webpage and return its readable text."""

    name = "web_fetch"
    description = (
        "Fetch and parse content from a webpage URL. Retrieves the text content, "
        "removes HTML markup, and returns clean text suitable for analysis."
    )
    parameters = {
        "type": "object",
        "properties": {
            "url": {"type": "string", "minLength": 1, "description": "The webpage URL to fetch content from"},
        },
        "required": ["url"],
    }

    def __init__(self, client: DuckDuckGoClient, limiter: RateLimiter | None = None):
        self.client = client
        self.limiter = limiter or RateLimiter(client.config.fetch.requests_per_minute)

    async def execute(self, url: str, **kwargs: Any) -> str:
        try:
            if not url or not url.strip():
                raise ValueError("url must not be empty")
            await self.limiter.acquire(timeout=_acquire_timeout(self.client))
            return await self.client.fetch_content(url.strip())
        except Exception as e:
            logger.warning("web_fetch failed for {}: {}", url, e)
            return f"An error occurred while fetching content: {e}"
