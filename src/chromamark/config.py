"""Pipeline configuration models and YAML config loading.

A config file (chromamark.yaml) looks like::

    enabled: true
    features:
      strikethrough:
        prefix: "--"
        suffix: "--"
      copy_to_clipboard:
        enabled: true
    palette:
      brand: "#3366ff"

Features not listed keep their default delimiters and state; palette entries
extend the built-in named colors. Palette names are letters and underscores
only, so they can appear in markup.

Features run in a fixed order, so a delimiter chosen for an earlier feature
can split the payload of a later one. Italic runs before color: setting the
italic delimiter to "_" breaks names such as ``dark_blue`` in
``{dark_blue}(text)``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .colors import DEFAULT_PALETTE, NAMED_COLOR_PATTERN, format_color, is_hex_color
from .exceptions import ConfigFileError, ConfigurationError
from .features import FEATURE_TYPES, FeatureName

DEFAULT_CONFIG_FILENAME = "chromamark.yaml"


def coerce_feature_name(name: FeatureName | str) -> FeatureName:
    """Convert a feature name string to FeatureName.

    Raises:
        ConfigurationError: If the name is not a known feature
    """
    try:
        return FeatureName(name)
    except ValueError:
        valid = ", ".join(f.value for f in FeatureName)
        raise ConfigurationError(
            f"Unknown feature: '{name}'. Valid features: {valid}"
        ) from None


class FeatureConfig(BaseModel):
    """Delimiters and enable flag for a single feature."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    prefix: str
    suffix: str
    enabled: bool = True

    @field_validator("prefix", "suffix")
    @classmethod
    def reject_empty_delimiter(cls, v: str) -> str:
        """Empty delimiters would match everywhere."""
        if not v:
            raise ValueError("delimiters must be non-empty strings")
        return v


def default_feature_config(name: FeatureName) -> FeatureConfig:
    """Build the default configuration for a feature."""
    feature_type = FEATURE_TYPES[name]
    return FeatureConfig(
        prefix=feature_type.default_prefix,
        suffix=feature_type.default_suffix,
        enabled=feature_type.enabled_by_default,
    )


def _default_features() -> dict[FeatureName, FeatureConfig]:
    return {name: default_feature_config(name) for name in FEATURE_TYPES}


def _default_palette() -> dict[str, str]:
    return {name: format_color(value) for name, value in DEFAULT_PALETTE.items()}


class MarkupConfig(BaseModel):
    """Complete pipeline configuration.

    Instances are immutable; the ``with_*`` methods return updated copies.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    enabled: bool = True
    features: dict[FeatureName, FeatureConfig] = Field(default_factory=_default_features)
    palette: dict[str, str] = Field(default_factory=_default_palette)

    @field_validator("features", mode="before")
    @classmethod
    def merge_feature_defaults(cls, v: Any) -> dict[FeatureName, Any]:
        """Fill in features that are missing or only partially specified."""
        if v is None:
            return _default_features()
        if not isinstance(v, Mapping):
            raise ValueError("features must be a mapping of feature name to settings")

        merged: dict[FeatureName, Any] = {}
        overrides = {coerce_feature_name(k): item for k, item in v.items()}  # type: ignore[misc]
        for name in FEATURE_TYPES:
            settings = default_feature_config(name).model_dump()
            override = overrides.get(name)
            if isinstance(override, FeatureConfig):
                settings = override.model_dump()
            elif isinstance(override, Mapping):
                settings.update(override)  # type: ignore[arg-type]
            elif override is not None:
                raise ValueError(f"settings for feature '{name.value}' must be a mapping")
            merged[name] = settings
        return merged

    @field_validator("palette", mode="before")
    @classmethod
    def merge_palette(cls, v: Any) -> dict[str, str]:
        """Extend the built-in palette; names are case-insensitive."""
        palette = _default_palette()
        if v is None:
            return palette
        if not isinstance(v, Mapping):
            raise ValueError("palette must be a mapping of color name to '#RRGGBB'")
        for name, value in v.items():  # type: ignore[misc]
            if not isinstance(name, str) or not re.fullmatch(NAMED_COLOR_PATTERN, name):
                raise ValueError(
                    f"palette name {name!r} must be a letter followed by letters or underscores"
                )
            if not isinstance(value, str) or not is_hex_color(value):
                raise ValueError(f"palette color '{name}' must be '#RRGGBB', got {value!r}")
            palette[name.lower()] = value.lower()
        return palette

    @property
    def palette_colors(self) -> dict[str, int]:
        """Palette with values converted to 24-bit integers."""
        return {name: int(value[1:], 16) for name, value in self.palette.items()}

    def feature(self, name: FeatureName | str) -> FeatureConfig:
        """Get a feature's configuration."""
        return self.features[coerce_feature_name(name)]

    def with_enabled(self, enabled: bool) -> MarkupConfig:
        """Return a copy with global formatting switched on or off."""
        return self._rebuild(enabled=enabled)

    def with_feature(self, name: FeatureName | str, **changes: Any) -> MarkupConfig:
        """Return a copy with one feature's settings changed.

        Raises:
            ConfigurationError: If the name is unknown or the settings are invalid
        """
        feature_name = coerce_feature_name(name)
        settings = {**self.features[feature_name].model_dump(), **changes}
        try:
            updated = FeatureConfig.model_validate(settings)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid settings for '{feature_name.value}': {e}") from e
        return self._rebuild(features={**self.features, feature_name: updated})

    def _rebuild(self, **changes: Any) -> MarkupConfig:
        data = {"enabled": self.enabled, "features": self.features, "palette": self.palette}
        data.update(changes)
        try:
            return MarkupConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e


def load_config(config_path: Path | str) -> MarkupConfig:
    """Load pipeline configuration from a YAML file.

    Args:
        config_path: Path to chromamark.yaml

    Returns:
        Validated MarkupConfig

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigFileError: If the file is unreadable, empty, not YAML, or fails validation
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigFileError(f"Invalid YAML in {config_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(f"Cannot read config file {config_path}: {e}") from e

    if not data:
        raise ConfigFileError(f"Empty configuration file: {config_path}")
    if not isinstance(data, dict):
        raise ConfigFileError(f"Config must be a mapping at top level: {config_path}")

    try:
        return MarkupConfig.model_validate(data)
    except (ValidationError, ConfigurationError) as e:
        raise ConfigFileError(f"Invalid configuration in {config_path}: {e}") from e


def discover_config(config_path: Path | None = None) -> MarkupConfig | None:
    """Find and load a config file.

    Search order:
    1. Explicit config_path argument (must exist)
    2. Current directory / chromamark.yaml

    Returns:
        The loaded config, or None if no config file was found
    """
    if config_path is not None:
        return load_config(config_path)

    cwd_config = Path(DEFAULT_CONFIG_FILENAME)
    if cwd_config.exists():
        return load_config(cwd_config)

    return None
