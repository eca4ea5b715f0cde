"""Gradient feature: ``~#ff0000,#00ff00,#0000ff~(text)``.

The text is split into one contiguous segment per pair of adjacent color
stops. Segment lengths differ by at most one character (the first
``n % (k - 1)`` segments take the extra characters) and always sum to the
text length. Within a segment of length ``L`` the character at local index
``j`` is colored with ratio ``j / (L - 1)`` between the segment's start and
end stop, or ratio 0 when ``L == 1``. Each character becomes its own run.

Invalid stops are dropped. When none survive, the whole span is left as
literal text, the same as an unknown color in a color span.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from chromamark.colors import COLOR_TOKEN_PATTERN, interpolate_color, is_valid_color, parse_color
from chromamark.features.base import FeatureName, MarkdownFeature
from chromamark.logger import debug_enabled, get_logger
from chromamark.models import StyledRun

logger = get_logger()

# Body text admits one level of balanced parentheses so '((text))' captures '(text)'
_BODY_PATTERN = r"((?:\([^()]*\)|[^()])*)"
_WRAPPED_BODY = re.compile(r"\(([^()]*)\)")


def gradient_colors(stops: Sequence[int], length: int) -> list[int]:
    """Compute one color per character for a gradient over ``stops``.

    Args:
        stops: Ordered color stops (at least one)
        length: Number of characters to color

    Returns:
        List of ``length`` 24-bit colors

    Raises:
        ValueError: If ``stops`` is empty
    """
    if not stops:
        raise ValueError("gradient needs at least one color stop")
    if len(stops) == 1:
        return [stops[0]] * length

    segment_count = len(stops) - 1
    base_length, remainder = divmod(length, segment_count)

    colors: list[int] = []
    for index in range(segment_count):
        segment_length = base_length + (1 if index < remainder else 0)
        start, end = stops[index], stops[index + 1]
        for offset in range(segment_length):
            ratio = offset / (segment_length - 1) if segment_length > 1 else 0.0
            colors.append(interpolate_color(start, end, ratio))

    return colors


class Gradient(MarkdownFeature):
    """Interpolates two or more color stops across the parenthesized text.

    A single valid stop degrades to a solid color; no valid stops leave the
    whole span as literal text.
    """

    name = FeatureName.GRADIENT
    default_prefix = "~"
    default_suffix = "~"

    def build_pattern(self) -> str:
        stops = rf"({COLOR_TOKEN_PATTERN}(?:,{COLOR_TOKEN_PATTERN})*)"
        return rf"{self.quoted_prefix}{stops}{self.quoted_suffix}\({_BODY_PATTERN}\)"

    def extract_stops(self, tokens: str) -> list[int]:
        """Convert the comma-separated stop list, dropping invalid tokens."""
        stops: list[int] = []
        for token in tokens.split(","):
            if not is_valid_color(token, self.palette):
                logger.debug("dropping unknown color token %r", token, extra=self.log_extra)
                continue
            color = parse_color(token, self.palette)
            if color is not None:
                stops.append(color)
        return stops

    def transform(self, match: re.Match[str], run: StyledRun) -> list[StyledRun]:
        stops = self.extract_stops(match.group(1))
        text = match.group(2)

        wrapped = _WRAPPED_BODY.fullmatch(text)
        if wrapped:
            text = wrapped.group(1)

        if not stops:
            return [StyledRun(match.group(0), run.style)]
        if len(stops) == 1:
            return [StyledRun(text, run.style.with_color(stops[0]))]

        colors = gradient_colors(stops, len(text))
        if debug_enabled():
            logger.debug(
                "%d stops over %d characters -> %s",
                len(stops),
                len(text),
                ", ".join(f"{c:06x}" for c in colors),
                extra=self.log_extra,
            )
        return [
            StyledRun(char, run.style.with_color(color))
            for char, color in zip(text, colors, strict=True)
        ]
