"""DuckDuckGo search and page fetching primitives."""

from duckscout.agent.tools.websearch.client import DuckDuckGoClient, SearchFailure
from duckscout.agent.tools.websearch.models import SearchHit
from duckscout.agent.tools.websearch.ratelimit import ConfigurationError, RateLimiter

__all__ = [
    "ConfigurationError",
    "DuckDuckGoClient",
    "RateLimiter",
    "SearchFailure",
    "SearchHit",
]
