"""chromamark - inline markup to styled text runs."""

from chromamark.config import FeatureConfig, MarkupConfig, load_config
from chromamark.exceptions import ChromamarkError, ConfigFileError, ConfigurationError
from chromamark.features import FeatureName
from chromamark.models import (
    ActionKind,
    ClickAction,
    StyledRun,
    StyledSequence,
    StyleDescriptor,
)
from chromamark.pipeline import (
    MarkdownPipeline,
    disable_for,
    enable_for,
    get_default_pipeline,
    parse,
    set_delimiters,
    set_feature_enabled,
    set_global_enabled,
)

__version__ = "0.1.0"

__all__ = [
    "ActionKind",
    "ChromamarkError",
    "ClickAction",
    "ConfigFileError",
    "ConfigurationError",
    "FeatureConfig",
    "FeatureName",
    "MarkdownPipeline",
    "MarkupConfig",
    "StyleDescriptor",
    "StyledRun",
    "StyledSequence",
    "disable_for",
    "enable_for",
    "get_default_pipeline",
    "load_config",
    "parse",
    "set_delimiters",
    "set_feature_enabled",
    "set_global_enabled",
]
