"""Feature contract and the shared match/replace loop."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import ClassVar

from chromamark.colors import DEFAULT_PALETTE
from chromamark.exceptions import ConfigurationError
from chromamark.logger import get_logger
from chromamark.models import StyledRun, StyledSequence

logger = get_logger()


class FeatureName(str, Enum):
    """Markup features, in pipeline order."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    SPOILER = "spoiler"
    HYPERLINK = "hyperlink"
    COLOR = "color"
    GRADIENT = "gradient"
    COPY_TO_CLIPBOARD = "copy_to_clipboard"


class MarkdownFeature(ABC):
    """A single inline markup feature.

    Subclasses provide the regex grammar (built around the escaped prefix and
    suffix) and a transform that turns one match into styled runs. The shared
    apply() loop maps the feature over every run of a sequence independently,
    so spans restyled by an earlier feature keep their run boundaries and only
    their literal text is scanned again.
    """

    name: ClassVar[FeatureName]
    default_prefix: ClassVar[str]
    default_suffix: ClassVar[str]
    enabled_by_default: ClassVar[bool] = True

    def __init__(
        self,
        prefix: str | None = None,
        suffix: str | None = None,
        *,
        enabled: bool | None = None,
        palette: Mapping[str, int] | None = None,
    ) -> None:
        self.prefix = self.default_prefix if prefix is None else prefix
        self.suffix = self.default_suffix if suffix is None else suffix
        self.enabled = self.enabled_by_default if enabled is None else enabled
        self.palette = DEFAULT_PALETTE if palette is None else palette

        # An empty delimiter would let the pattern match everywhere
        if not self.prefix or not self.suffix:
            raise ConfigurationError(
                f"{self.name.value}: prefix and suffix must be non-empty strings"
            )
        self.pattern = re.compile(self.build_pattern())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(prefix={self.prefix!r}, suffix={self.suffix!r}, "
            f"enabled={self.enabled})"
        )

    @property
    def log_extra(self) -> dict[str, str]:
        """Record attributes that tag log lines with this feature's name."""
        return {"feature": self.name.value}

    @property
    def quoted_prefix(self) -> str:
        """Prefix escaped for use as literal regex text."""
        return re.escape(self.prefix)

    @property
    def quoted_suffix(self) -> str:
        """Suffix escaped for use as literal regex text."""
        return re.escape(self.suffix)

    @abstractmethod
    def build_pattern(self) -> str:
        """Return the regex source for this feature's grammar."""
        ...

    @abstractmethod
    def transform(self, match: re.Match[str], run: StyledRun) -> list[StyledRun]:
        """Convert one match found inside ``run`` into styled runs.

        Output styles are built from ``run.style`` (the baseline) with the
        feature's effect merged in.
        """
        ...

    def apply(self, sequence: StyledSequence) -> StyledSequence:
        """Apply this feature to every run of ``sequence``.

        Returns a new sequence; the input is never modified. A disabled
        feature returns the input unchanged.
        """
        if not self.enabled:
            return sequence

        result: StyledSequence = []
        for run in sequence:
            result.extend(self.process_run(run))
        return result

    def process_run(self, run: StyledRun) -> StyledSequence:
        """Scan one run's text for non-overlapping leftmost matches."""
        logger.scans("scanning %r", run.text, extra=self.log_extra)

        output: StyledSequence = []
        position = 0
        # finditer always advances past each match, including zero-width ones
        for match in self.pattern.finditer(run.text):
            if match.start() > position:
                output.append(StyledRun(run.text[position : match.start()], run.style))
            output.extend(_non_empty(self.transform(match, run)))
            logger.matches("matched %r", match.group(0), extra=self.log_extra)
            position = match.end()

        if position < len(run.text):
            output.append(StyledRun(run.text[position:], run.style))

        return output or [StyledRun("", run.style)]


def _non_empty(runs: Iterable[StyledRun]) -> list[StyledRun]:
    return [run for run in runs if run.text]
