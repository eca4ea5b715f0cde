"""Tests for rendering helpers."""

from chromamark.models import ActionKind, ClickAction, StyledRun, StyleDescriptor
from chromamark.pipeline import MarkdownPipeline
from chromamark.render import (
    coalesce_runs,
    describe_style,
    to_ansi,
    to_component_json,
    to_plain_text,
)


def test_plain_text_drops_markup():
    """Test that plain text is the display text without delimiters."""
    runs = MarkdownPipeline().parse("**a** [b](https://x.example) ~#ff0000,#0000ff~(cd)")
    assert to_plain_text(runs) == "a b cd"


def test_coalesce_merges_equal_neighbors():
    """Test merging adjacent runs with the same style."""
    red = StyleDescriptor(color=0xFF0000)
    runs = [StyledRun("a", red), StyledRun("b", red), StyledRun("c"), StyledRun("d", red)]

    assert coalesce_runs(runs) == [StyledRun("ab", red), StyledRun("c"), StyledRun("d", red)]


def test_coalesce_single_stop_gradient_run():
    """Test that a flat gradient collapses into one run."""
    runs = MarkdownPipeline().parse("~#336699,#336699~(hello)")

    assert len(runs) == 5
    assert coalesce_runs(runs) == [StyledRun("hello", StyleDescriptor(color=0x336699))]


def test_ansi_flags_and_color():
    """Test SGR sequences for flags and 24-bit color."""
    runs = [
        StyledRun("plain "),
        StyledRun("bold", StyleDescriptor(bold=True, color=0x336699)),
    ]
    assert to_ansi(runs) == "plain \033[1;38;2;51;102;153mbold\033[0m"


def test_ansi_hyperlink():
    """Test OSC 8 hyperlinks."""
    link = ClickAction(ActionKind.OPEN_URL, "https://example.com")
    runs = [StyledRun("site", StyleDescriptor(click=link))]

    assert to_ansi(runs) == "\033]8;;https://example.com\033\\site\033]8;;\033\\"


def test_ansi_skips_empty_runs():
    """Test that empty runs emit nothing."""
    assert to_ansi([StyledRun("", StyleDescriptor(bold=True))]) == ""


def test_component_json():
    """Test chat-component dicts."""
    runs = MarkdownPipeline().parse("hi **there** [x](https://x.example) ||s||")

    assert to_component_json(runs) == [
        {"text": "hi "},
        {"text": "there", "bold": True},
        {"text": " "},
        {
            "text": "x",
            "clickEvent": {"action": "open_url", "value": "https://x.example"},
        },
        {"text": " "},
        {
            "text": "s",
            "obfuscated": True,
            "hoverEvent": {"action": "show_text", "contents": "s"},
        },
    ]


def test_component_json_color():
    """Test color formatting in components."""
    runs = [StyledRun("c", StyleDescriptor(italic=True, color=0x0000AA))]
    assert to_component_json(runs) == [{"text": "c", "italic": True, "color": "#0000aa"}]


def test_describe_style():
    """Test one-line style summaries."""
    assert describe_style(StyleDescriptor()) == "plain"
    assert describe_style(StyleDescriptor(bold=True, color=0x336699)) == "bold color=#336699"
    link = StyleDescriptor(click=ClickAction(ActionKind.OPEN_URL, "https://x.example"))
    assert describe_style(link) == "open_url=https://x.example"
