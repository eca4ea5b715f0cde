"""Solid color feature: ``{#ff8800}(text)`` or ``{gold}(text)``."""

from __future__ import annotations

import re

from chromamark.colors import COLOR_TOKEN_PATTERN, is_valid_color, parse_color
from chromamark.features.base import FeatureName, MarkdownFeature
from chromamark.logger import get_logger
from chromamark.models import StyledRun

logger = get_logger()


class Color(MarkdownFeature):
    """Applies one color token uniformly to the parenthesized text."""

    name = FeatureName.COLOR
    default_prefix = "{"
    default_suffix = "}"

    def build_pattern(self) -> str:
        return rf"{self.quoted_prefix}({COLOR_TOKEN_PATTERN}){self.quoted_suffix}\((.*?)\)"

    def transform(self, match: re.Match[str], run: StyledRun) -> list[StyledRun]:
        token, text = match.group(1), match.group(2)
        color = parse_color(token, self.palette) if is_valid_color(token, self.palette) else None
        if color is None:
            logger.debug("unknown color token %r", token, extra=self.log_extra)
            return [StyledRun(match.group(0), run.style)]
        return [StyledRun(text, run.style.with_color(color))]
