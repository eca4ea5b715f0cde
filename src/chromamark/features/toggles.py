"""Toggle-style features that switch on a single format flag."""

from __future__ import annotations

import re
from typing import ClassVar

from chromamark.features.base import FeatureName, MarkdownFeature
from chromamark.models import StyledRun, StyleDescriptor


class ToggleFeature(MarkdownFeature):
    """Wraps ``prefix(.*?)suffix`` in one extra format flag.

    The smallest match wins, and the same literal may serve as both
    delimiters (``**bold**``). Unlike the bare grammar, which would consume
    an empty pair and emit nothing, a match with nothing between the
    delimiters (``****``) is not treated as markup and is kept as literal
    text.
    """

    effect: ClassVar[StyleDescriptor]

    def build_pattern(self) -> str:
        return f"{self.quoted_prefix}(.*?){self.quoted_suffix}"

    def effect_for(self, text: str) -> StyleDescriptor:
        """Style merged onto the baseline for the captured ``text``."""
        return self.effect

    def transform(self, match: re.Match[str], run: StyledRun) -> list[StyledRun]:
        inner = match.group(1)
        if not inner:
            return [StyledRun(match.group(0), run.style)]
        return [run.restyle(inner, self.effect_for(inner))]


class Bold(ToggleFeature):
    name = FeatureName.BOLD
    default_prefix = "**"
    default_suffix = "**"
    effect = StyleDescriptor(bold=True)


class Italic(ToggleFeature):
    name = FeatureName.ITALIC
    default_prefix = "*"
    default_suffix = "*"
    effect = StyleDescriptor(italic=True)


class Underline(ToggleFeature):
    name = FeatureName.UNDERLINE
    default_prefix = "__"
    default_suffix = "__"
    effect = StyleDescriptor(underline=True)


class Strikethrough(ToggleFeature):
    name = FeatureName.STRIKETHROUGH
    default_prefix = "~~"
    default_suffix = "~~"
    effect = StyleDescriptor(strikethrough=True)


class Spoiler(ToggleFeature):
    """Obfuscates its text and reveals it as hover text on interaction."""

    name = FeatureName.SPOILER
    default_prefix = "||"
    default_suffix = "||"
    effect = StyleDescriptor(obfuscated=True)

    def effect_for(self, text: str) -> StyleDescriptor:
        return StyleDescriptor(obfuscated=True, hover_text=text)
