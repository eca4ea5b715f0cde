"""Copy-to-clipboard feature: clicking the span copies its text."""

from __future__ import annotations

import re

from chromamark.features.base import FeatureName, MarkdownFeature
from chromamark.models import ActionKind, ClickAction, StyledRun, StyleDescriptor


class CopyToClipboard(MarkdownFeature):
    """Attaches a copy-to-clipboard click action to ``prefix(.*?)suffix``.

    Off unless explicitly enabled.
    """

    name = FeatureName.COPY_TO_CLIPBOARD
    default_prefix = "`"
    default_suffix = "`"
    enabled_by_default = False

    def build_pattern(self) -> str:
        return f"{self.quoted_prefix}(.*?){self.quoted_suffix}"

    def transform(self, match: re.Match[str], run: StyledRun) -> list[StyledRun]:
        text = match.group(1)
        if not text:
            return [StyledRun(match.group(0), run.style)]
        action = ClickAction(ActionKind.COPY_TO_CLIPBOARD, text)
        return [run.restyle(text, StyleDescriptor(click=action, hover_text="Click to copy"))]
