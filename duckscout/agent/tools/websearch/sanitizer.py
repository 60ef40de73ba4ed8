"""Reduce fetched HTML to bounded plain text."""

import re
from html import unescape

MAX_CONTENT_CHARS = 8000
TRUNCATION_MARKER = "... [content truncated]"

# The backreference pins each removal to the closing tag of the same element.
_BLOCK_RE = re.compile(
    r"<(script|style|nav|header|footer)\b[^>]*>.*?</\1\s*>",
    re.IGNORECASE | re.DOTALL,
)
_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")


def sanitize_html(html: str, max_chars: int = MAX_CONTENT_CHARS) -> str:
    """Strip markup and boilerplate elements, collapse whitespace and cap the length."""
    text = _BLOCK_RE.sub("", html)
    text = _TAG_RE.sub(" ", text)
    text = _WHITESPACE_RE.sub(" ", unescape(text)).strip()
    if len(text) > max_chars:
        text = text[:max_chars] + TRUNCATION_MARKER
    return text
