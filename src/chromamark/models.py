"""Style model: style descriptors and styled text runs."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class ActionKind(str, Enum):
    """Interactive actions a host can attach to a run."""

    OPEN_URL = "open_url"
    COPY_TO_CLIPBOARD = "copy_to_clipboard"


@dataclass(frozen=True, slots=True)
class ClickAction:
    """Action performed when the host's user clicks a run."""

    kind: ActionKind
    value: str


@dataclass(frozen=True, slots=True)
class StyleDescriptor:
    """Formatting applied to a run of text.

    Flags are additive: merging a descriptor never clears a flag that is
    already set. ``color``, ``click`` and ``hover_text`` are scalars where the
    last writer wins. ``color`` is a 24-bit RGB integer, or None to inherit the
    host's default color.
    """

    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    obfuscated: bool = False
    color: int | None = None
    click: ClickAction | None = None
    hover_text: str | None = None

    def merge(self, other: StyleDescriptor) -> StyleDescriptor:
        """Return this style with ``other`` layered on top."""
        return StyleDescriptor(
            bold=self.bold or other.bold,
            italic=self.italic or other.italic,
            underline=self.underline or other.underline,
            strikethrough=self.strikethrough or other.strikethrough,
            obfuscated=self.obfuscated or other.obfuscated,
            color=other.color if other.color is not None else self.color,
            click=other.click if other.click is not None else self.click,
            hover_text=other.hover_text if other.hover_text is not None else self.hover_text,
        )

    def with_color(self, color: int) -> StyleDescriptor:
        """Return a copy with ``color`` replacing any previous color."""
        return replace(self, color=color)

    def with_click(self, action: ClickAction) -> StyleDescriptor:
        """Return a copy with ``action`` replacing any previous click action."""
        return replace(self, click=action)

    @property
    def is_plain(self) -> bool:
        """True when no flag, color or interaction is set."""
        return self == EMPTY_STYLE


EMPTY_STYLE = StyleDescriptor()


@dataclass(frozen=True, slots=True)
class StyledRun:
    """A span of text sharing one style."""

    text: str
    style: StyleDescriptor = EMPTY_STYLE

    def restyle(self, text: str, effect: StyleDescriptor) -> StyledRun:
        """Build a run for ``text`` with ``effect`` merged onto this run's style."""
        return StyledRun(text, self.style.merge(effect))


# Ordered runs; concatenation order is display order
StyledSequence = list[StyledRun]
