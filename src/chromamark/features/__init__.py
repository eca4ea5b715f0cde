"""Inline markup features and the fixed order the pipeline applies them in."""

from chromamark.features.base import FeatureName, MarkdownFeature
from chromamark.features.clipboard import CopyToClipboard
from chromamark.features.color import Color
from chromamark.features.gradient import Gradient, gradient_colors
from chromamark.features.hyperlink import Hyperlink, is_valid_url
from chromamark.features.toggles import (
    Bold,
    Italic,
    Spoiler,
    Strikethrough,
    ToggleFeature,
    Underline,
)

# Pipeline order; earlier features protect the spans they restyle
FEATURE_TYPES: dict[FeatureName, type[MarkdownFeature]] = {
    FeatureName.BOLD: Bold,
    FeatureName.ITALIC: Italic,
    FeatureName.UNDERLINE: Underline,
    FeatureName.STRIKETHROUGH: Strikethrough,
    FeatureName.SPOILER: Spoiler,
    FeatureName.HYPERLINK: Hyperlink,
    FeatureName.COLOR: Color,
    FeatureName.GRADIENT: Gradient,
    FeatureName.COPY_TO_CLIPBOARD: CopyToClipboard,
}

__all__ = [
    "FEATURE_TYPES",
    "Bold",
    "Color",
    "CopyToClipboard",
    "FeatureName",
    "Gradient",
    "Hyperlink",
    "Italic",
    "MarkdownFeature",
    "Spoiler",
    "Strikethrough",
    "ToggleFeature",
    "Underline",
    "gradient_colors",
    "is_valid_url",
]
