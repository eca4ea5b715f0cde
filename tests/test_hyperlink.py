"""Tests for the hyperlink feature."""

import pytest

from chromamark.features import Hyperlink, is_valid_url
from chromamark.models import ActionKind, ClickAction, StyledRun, StyleDescriptor
from tests.conftest import single, texts


@pytest.mark.parametrize(
    "url",
    ["http://x", "https://example.com", "https://example.com/path?q=1#frag", "HTTPS://EXAMPLE.COM"],
)
def test_valid_urls(url: str) -> None:
    """Test URLs accepted as links."""
    assert is_valid_url(url)


@pytest.mark.parametrize(
    "url",
    ["", "example.com", "ftp://example.com", "javascript:alert(1)", "https://", "http://a b"],
)
def test_invalid_urls(url: str) -> None:
    """Test URLs rejected as links."""
    assert not is_valid_url(url)


@pytest.mark.parametrize(
    "url",
    ["https://example.com/\x1b]8;;evil", "https://exa\x00mple.com", "https://example.com/\x7f"],
)
def test_control_characters_rejected(url: str) -> None:
    """Test URLs with control characters are rejected."""
    assert not is_valid_url(url)


def test_link_with_escape_sequence_left_literal():
    """Test that an escape character in the URL keeps the span literal."""
    text = "[x](https://example.com/\x1b[31m)"
    result = Hyperlink().apply(single(text))
    assert result == [StyledRun(text)]


def test_link_attaches_open_url_action():
    """Test that the label gets an open-url click action."""
    result = Hyperlink().apply(single("see [the docs](https://example.com/docs) now"))

    assert texts(result) == ["see ", "the docs", " now"]
    assert result[1].style.click == ClickAction(ActionKind.OPEN_URL, "https://example.com/docs")
    assert result[0].style.click is None


def test_link_keeps_baseline_style():
    """Test that link styling merges onto the run's style."""
    result = Hyperlink().apply([StyledRun("[a](http://x)", StyleDescriptor(bold=True))])

    assert len(result) == 1
    assert result[0].style.bold
    assert result[0].style.click is not None


def test_invalid_url_left_literal():
    """Test that a malformed URL keeps the markup as plain text."""
    result = Hyperlink().apply(single("[click](not a url)"))
    assert result == [StyledRun("[click](not a url)")]


def test_invalid_url_with_nested_parens_preserves_text():
    """Test fail-soft handling when the URL itself contains parentheses."""
    text = "[a](javascript:alert(1))"
    result = Hyperlink().apply(single(text))

    assert "".join(texts(result)) == text
    assert all(run.style.click is None for run in result)


def test_empty_label_displays_url():
    """Test that an empty label falls back to the URL."""
    result = Hyperlink().apply(single("[](https://example.com)"))
    assert result[0].text == "https://example.com"


def test_label_without_url_is_literal():
    """Test that brackets alone are not a link."""
    result = Hyperlink().apply(single("[just brackets]"))
    assert result == [StyledRun("[just brackets]")]
