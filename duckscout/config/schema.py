"""Configuration schema using Pydantic."""

from pydantic import BaseModel, Field

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class WebSearchConfig(BaseModel):
    """DuckDuckGo HTML search configuration."""

    endpoint: str = "https://html.duckduckgo.com/html"
    max_results: int = Field(default=10, ge=1)
    requests_per_minute: int = Field(default=30, ge=1)


class WebFetchConfig(BaseModel):
    """Page fetch configuration."""

    max_chars: int = Field(default=8000, ge=1)
    requests_per_minute: int = Field(default=20, ge=1)


class WebToolsConfig(BaseModel):
    """Web tools configuration."""

    search: WebSearchConfig = Field(default_factory=WebSearchConfig)
    fetch: WebFetchConfig = Field(default_factory=WebFetchConfig)
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = Field(default=30.0, gt=0)
    acquire_timeout: float = Field(default=0.0, ge=0)  # 0 waits for a slot indefinitely


class ToolsConfig(BaseModel):
    """Tools configuration."""

    web: WebToolsConfig = Field(default_factory=WebToolsConfig)


class Config(BaseModel):
    """Root configuration for duckscout."""

    tools: ToolsConfig = Field(default_factory=ToolsConfig)
