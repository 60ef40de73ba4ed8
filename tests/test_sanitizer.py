import pytest

from duckscout.agent.tools.websearch.sanitizer import (
    MAX_CONTENT_CHARS,
    TRUNCATION_MARKER,
    sanitize_html,
)


@pytest.mark.parametrize("tag", ["script", "style", "nav", "header", "footer"])
def test_removes_boilerplate_elements_with_content(tag: str) -> None:
    html = f"<p>Before</p><{tag} class=\"x\">\n  hidden\n  text\n</{tag}><p>After</p>"
    assert sanitize_html(html) == "Before After"


def test_removal_is_case_insensitive() -> None:
    html = "<SCRIPT type='text/javascript'>alert(1)</Script>Visible"
    assert sanitize_html(html) == "Visible"


def test_removal_waits_for_closing_tag_of_same_element() -> None:
    html = '<script>var s = "</style>";</script>Text'
    assert sanitize_html(html) == "Text"


def test_nested_boilerplate_is_removed_with_parent() -> None:
    html = "<header>Site <nav><a href='/'>Home</a></nav> title</header><main>Article</main>"
    assert sanitize_html(html) == "Article"


def test_tags_become_spaces_and_whitespace_collapses() -> None:
    html = "<div><p>Hello</p><p>World</p>\n\n\t<span>again</span></div>"
    assert sanitize_html(html) == "Hello World again"


def test_entities_are_unescaped() -> None:
    assert sanitize_html("<p>Fish &amp; Chips&nbsp;&nbsp;today</p>") == "Fish & Chips today"


def test_plain_text_over_cap_is_truncated_with_marker() -> None:
    text = sanitize_html("a" * 9000)

    assert text == "a" * MAX_CONTENT_CHARS + TRUNCATION_MARKER
    assert len(text) == 8000 + len(TRUNCATION_MARKER)


def test_text_at_cap_is_not_truncated() -> None:
    assert sanitize_html("b" * 8000) == "b" * 8000


def test_custom_cap() -> None:
    assert sanitize_html("<p>abcdefghij</p>", max_chars=4) == "abcd" + TRUNCATION_MARKER
