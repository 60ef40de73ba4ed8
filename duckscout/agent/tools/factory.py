"""Tool registry factory."""

from duckscout.agent.tools.registry import ToolRegistry
from duckscout.agent.tools.web import WebFetchTool, WebSearchTool
from duckscout.agent.tools.websearch.client import DuckDuckGoClient
from duckscout.agent.tools.websearch.ratelimit import RateLimiter


def build_web_tool_registry(client: DuckDuckGoClient) -> ToolRegistry:
    """Register search and fetch tools, each with its own limiter, over one client."""
    config = client.config
    registry = ToolRegistry()
    registry.register(
        WebSearchTool(client, RateLimiter(config.search.requests_per_minute))
    )
    registry.register(
        WebFetchTool(client, RateLimiter(config.fetch.requests_per_minute))
    )
    return registry
