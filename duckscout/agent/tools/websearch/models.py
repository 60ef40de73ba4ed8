"""Shared web search models."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SearchHit:
    """One accepted search result, numbered densely from 1."""

    title: str
    url: str
    snippet: str
    position: int
