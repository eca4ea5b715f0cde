"""Color token validation, conversion and interpolation."""

from __future__ import annotations

import re
from collections.abc import Mapping

# A hex color token: '#' followed by exactly six hex digits
HEX_COLOR_PATTERN = r"#[0-9A-Fa-f]{6}"
# A named color token as it may appear inside markup
NAMED_COLOR_PATTERN = r"[A-Za-z][A-Za-z_]*"
# Either form, for building feature grammars
COLOR_TOKEN_PATTERN = f"(?:{HEX_COLOR_PATTERN}|{NAMED_COLOR_PATTERN})"

MAX_COLOR = 0xFFFFFF

_HEX_COLOR_RE = re.compile(HEX_COLOR_PATTERN)

# Sixteen-color chat palette most hosts ship with
DEFAULT_PALETTE: dict[str, int] = {
    "black": 0x000000,
    "dark_blue": 0x0000AA,
    "dark_green": 0x00AA00,
    "dark_aqua": 0x00AAAA,
    "dark_red": 0xAA0000,
    "dark_purple": 0xAA00AA,
    "gold": 0xFFAA00,
    "gray": 0xAAAAAA,
    "dark_gray": 0x555555,
    "blue": 0x5555FF,
    "green": 0x55FF55,
    "aqua": 0x55FFFF,
    "red": 0xFF5555,
    "light_purple": 0xFF55FF,
    "yellow": 0xFFFF55,
    "white": 0xFFFFFF,
}


def is_hex_color(token: str) -> bool:
    """Check whether ``token`` is a '#RRGGBB' hex color (case-insensitive)."""
    return _HEX_COLOR_RE.fullmatch(token) is not None


def is_valid_color(token: str, palette: Mapping[str, int] | None = None) -> bool:
    """Check whether ``token`` is a hex color or a name in the palette.

    Args:
        token: Color token such as '#ff8800' or 'gold'
        palette: Named colors to accept (defaults to DEFAULT_PALETTE)

    Returns:
        True if the token can be converted with parse_color()
    """
    if is_hex_color(token):
        return True
    names = DEFAULT_PALETTE if palette is None else palette
    return token.lower() in names


def parse_color(token: str, palette: Mapping[str, int] | None = None) -> int | None:
    """Convert a color token to a 24-bit RGB integer.

    Callers are expected to validate first. An invalid token fails closed
    and returns None (no color) rather than raising.

    Example:
        parse_color('#336699')  # Returns 0x336699
        parse_color('gold')  # Returns 0xFFAA00
    """
    if is_hex_color(token):
        return int(token[1:], 16)
    names = DEFAULT_PALETTE if palette is None else palette
    value = names.get(token.lower())
    if value is None or not 0 <= value <= MAX_COLOR:
        return None
    return value


def format_color(color: int) -> str:
    """Format a 24-bit RGB integer as '#rrggbb'."""
    return f"#{color & MAX_COLOR:06x}"


def split_rgb(color: int) -> tuple[int, int, int]:
    """Split a 24-bit color into (red, green, blue) channels."""
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def interpolate_color(start: int, end: int, ratio: float) -> int:
    """Linearly interpolate between two colors, channel by channel.

    Each channel is computed as ``start + (end - start) * ratio`` and
    truncated toward zero, so ratio 0 gives ``start`` and ratio 1 gives ``end``
    exactly.
    """
    start_r, start_g, start_b = split_rgb(start)
    end_r, end_g, end_b = split_rgb(end)

    r = int(start_r + (end_r - start_r) * ratio)
    g = int(start_g + (end_g - start_g) * ratio)
    b = int(start_b + (end_b - start_b) * ratio)

    return (r << 16) | (g << 8) | b
