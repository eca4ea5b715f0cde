"""Hyperlink feature: ``[label](https://example.com)``."""

from __future__ import annotations

import re
from urllib.parse import urlparse

from chromamark.features.base import FeatureName, MarkdownFeature
from chromamark.logger import get_logger
from chromamark.models import ActionKind, ClickAction, StyledRun, StyleDescriptor

logger = get_logger()

ALLOWED_URL_SCHEMES = frozenset({"http", "https"})


def is_valid_url(url: str) -> bool:
    """Check that ``url`` is an absolute http(s) URL with a host.

    Whitespace and control characters are rejected so the URL can be
    embedded in terminal escape sequences.

    Example:
        is_valid_url('https://example.com/page')  # True
        is_valid_url('javascript:alert(1)')  # False
    """
    if not url or any(c.isspace() or c < " " or c == "\x7f" for c in url):
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        # Malformed netloc such as an unbalanced IPv6 bracket
        return False
    return parsed.scheme.lower() in ALLOWED_URL_SCHEMES and bool(parsed.netloc)


class Hyperlink(MarkdownFeature):
    """Attaches an open-url click action to the label text.

    A malformed URL leaves the whole match as literal text. An empty label
    displays the URL itself.
    """

    name = FeatureName.HYPERLINK
    default_prefix = "["
    default_suffix = "]"

    def build_pattern(self) -> str:
        return rf"{self.quoted_prefix}(.*?){self.quoted_suffix}\((.*?)\)"

    def transform(self, match: re.Match[str], run: StyledRun) -> list[StyledRun]:
        label, url = match.group(1), match.group(2).strip()
        if not is_valid_url(url):
            logger.debug("rejected url %r", url, extra=self.log_extra)
            return [StyledRun(match.group(0), run.style)]

        action = ClickAction(ActionKind.OPEN_URL, url)
        return [run.restyle(label or url, StyleDescriptor(click=action))]
