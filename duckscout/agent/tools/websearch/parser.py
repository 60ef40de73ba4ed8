"""Best-effort extraction of results from DuckDuckGo's HTML results page.

The page structure is undocumented and drifts, so extraction is pattern
based and degrades to an empty list rather than failing.
"""

import re
from html import unescape
from urllib.parse import unquote

from loguru import logger

from duckscout.agent.tools.websearch.models import SearchHit

REDIRECT_PREFIX = "//duckduckgo.com/l/?uddg="
_REDIRECT_PARAM = "uddg="

_TITLE_RE = re.compile(
    r'<h2[^>]*class="[^"]*result__title[^"]*"[^>]*>.*?<a[^>]*href="([^"]*)"[^>]*>(.*?)</a>',
    re.IGNORECASE | re.DOTALL,
)
_SNIPPET_RE = re.compile(
    r'<a[^>]*class="[^"]*result__snippet[^"]*"[^>]*>(.*?)</a>',
    re.IGNORECASE | re.DOTALL,
)
_TAG_RE = re.compile(r"<[^>]+>")

# Ads, tracking beacons and DuckDuckGo's own pages.
_BLOCKED_LINK_MARKERS = ("y.js", "duckduckgo.com")


def decode_redirect_url(url: str) -> str:
    """Unwrap a DuckDuckGo tracking redirect; other links are returned unchanged."""
    if not url.startswith(REDIRECT_PREFIX):
        return url
    idx = url.find(_REDIRECT_PARAM)
    if idx < 0:
        return url
    target = url[idx + len(_REDIRECT_PARAM):].split("&", 1)[0]
    return unquote(target)


def extract_results(html: str, max_results: int) -> list[SearchHit]:
    """
    Parse a results page into at most ``max_results`` hits.

    Title and snippet blocks are matched independently and paired by
    ordinal position. Only the first ``max_results`` title blocks are
    considered; rejected candidates do not consume a position.
    """
    titles = _TITLE_RE.findall(html)
    snippets = _SNIPPET_RE.findall(html)
    logger.debug("Matched {} title blocks and {} snippet blocks", len(titles), len(snippets))

    hits: list[SearchHit] = []
    for i, (href, raw_title) in enumerate(titles[:max_results]):
        link = decode_redirect_url(href)
        title = _clean(raw_title)
        snippet = _clean(snippets[i]) if i < len(snippets) else ""

        reason = _rejection_reason(title, link)
        if reason:
            logger.debug("Skipping candidate {}: {}", i + 1, reason)
            continue

        hits.append(SearchHit(title=title, url=link, snippet=snippet, position=len(hits) + 1))
    return hits


def _clean(fragment: str) -> str:
    return unescape(_TAG_RE.sub("", fragment)).strip()


def _rejection_reason(title: str, link: str) -> str | None:
    if not title:
        return "empty title"
    if not link.strip():
        return "empty link"
    for marker in _BLOCKED_LINK_MARKERS:
        if marker in link:
            return f"link contains {marker!r}"
    return None
