"""Helpers for handing styled runs to a display.

Supports plain text, ANSI terminal output (24-bit color, SGR flags and OSC 8
hyperlinks) and a chat-component JSON shape common to game chat hosts.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .colors import format_color, split_rgb
from .models import ActionKind, StyledRun, StyledSequence, StyleDescriptor

_ESC = "\033["
_RESET = f"{_ESC}0m"
_OSC8 = "\033]8;;"
_ST = "\033\\"

# SGR codes for each format flag
_FLAG_CODES = (
    ("bold", "1"),
    ("italic", "3"),
    ("underline", "4"),
    ("obfuscated", "7"),  # reverse video stands in for obfuscation
    ("strikethrough", "9"),
)


def to_plain_text(runs: Iterable[StyledRun]) -> str:
    """Concatenate run text, dropping all styling."""
    return "".join(run.text for run in runs)


def coalesce_runs(runs: Iterable[StyledRun]) -> StyledSequence:
    """Merge adjacent runs that share the same style.

    Useful after a gradient, which emits one run per character.
    """
    merged: StyledSequence = []
    for run in runs:
        if merged and merged[-1].style == run.style:
            merged[-1] = StyledRun(merged[-1].text + run.text, run.style)
        else:
            merged.append(run)
    return merged


def _sgr(style: StyleDescriptor) -> str:
    codes = [code for flag, code in _FLAG_CODES if getattr(style, flag)]
    if style.color is not None:
        r, g, b = split_rgb(style.color)
        codes.append(f"38;2;{r};{g};{b}")
    return f"{_ESC}{';'.join(codes)}m" if codes else ""


def to_ansi(runs: Iterable[StyledRun]) -> str:
    """Render runs as a string with ANSI escape sequences."""
    parts: list[str] = []
    for run in runs:
        if not run.text:
            continue
        sgr = _sgr(run.style)
        text = f"{sgr}{run.text}{_RESET}" if sgr else run.text
        click = run.style.click
        if click is not None and click.kind is ActionKind.OPEN_URL:
            text = f"{_OSC8}{click.value}{_ST}{text}{_OSC8}{_ST}"
        parts.append(text)
    return "".join(parts)


def _component(run: StyledRun) -> dict[str, Any]:
    style = run.style
    component: dict[str, Any] = {"text": run.text}
    for flag in ("bold", "italic", "underline", "strikethrough", "obfuscated"):
        if getattr(style, flag):
            component[flag] = True
    if style.color is not None:
        component["color"] = format_color(style.color)
    if style.click is not None:
        component["clickEvent"] = {"action": style.click.kind.value, "value": style.click.value}
    if style.hover_text is not None:
        component["hoverEvent"] = {"action": "show_text", "contents": style.hover_text}
    return component


def to_component_json(runs: Iterable[StyledRun]) -> list[dict[str, Any]]:
    """Render runs as a list of chat-component dicts.

    Example:
        to_component_json(parse('**hi**'))
        # [{'text': 'hi', 'bold': True}]
    """
    return [_component(run) for run in runs]


def describe_style(style: StyleDescriptor) -> str:
    """Summarize a style in one line, e.g. 'bold italic color=#336699'."""
    parts = [flag for flag, _ in _FLAG_CODES if getattr(style, flag)]
    if style.color is not None:
        parts.append(f"color={format_color(style.color)}")
    if style.click is not None:
        parts.append(f"{style.click.kind.value}={style.click.value}")
    if style.hover_text is not None:
        parts.append(f"hover={style.hover_text!r}")
    return " ".join(parts) if parts else "plain"
