"""Pipeline orchestrator: turns marked-up text into styled runs.

A MarkdownPipeline owns an immutable MarkupConfig. Configuration calls build
a new config under a lock and swap the reference; parse() reads the reference
once and runs without the lock, so concurrent parses never see a half-applied
update.

The module-level functions operate on a process-wide default pipeline.
"""

from __future__ import annotations

import threading

from .config import MarkupConfig, coerce_feature_name
from .features import FEATURE_TYPES, FeatureName, MarkdownFeature
from .logger import get_logger
from .models import EMPTY_STYLE, StyledRun, StyledSequence, StyleDescriptor

logger = get_logger()


class MarkdownPipeline:
    """Applies the enabled features, in fixed order, to produce styled runs."""

    def __init__(self, config: MarkupConfig | None = None) -> None:
        self._config = config if config is not None else MarkupConfig()
        self._lock = threading.Lock()
        self._features: tuple[MarkupConfig, list[MarkdownFeature]] | None = None

    @property
    def config(self) -> MarkupConfig:
        """Current configuration snapshot."""
        return self._config

    def configure(self, config: MarkupConfig) -> None:
        """Replace the whole configuration."""
        with self._lock:
            self._config = config

    def set_global_enabled(self, enabled: bool) -> None:
        """Switch all formatting on or off."""
        with self._lock:
            self._config = self._config.with_enabled(enabled)

    def set_feature_enabled(self, name: FeatureName | str, enabled: bool) -> None:
        """Switch a single feature on or off.

        Raises:
            ConfigurationError: If the feature name is unknown
        """
        with self._lock:
            self._config = self._config.with_feature(name, enabled=enabled)

    def set_delimiters(self, name: FeatureName | str, prefix: str, suffix: str) -> None:
        """Override a feature's prefix and suffix.

        Raises:
            ConfigurationError: If the name is unknown or a delimiter is empty
        """
        with self._lock:
            self._config = self._config.with_feature(name, prefix=prefix, suffix=suffix)

    def enable_for(self) -> FeatureSwitch:
        """Fluent helper: ``pipeline.enable_for().bold().italic()``."""
        return FeatureSwitch(self, enabled=True)

    def disable_for(self) -> FeatureSwitch:
        """Fluent helper: ``pipeline.disable_for().hyperlink()``."""
        return FeatureSwitch(self, enabled=False)

    def features(self) -> list[MarkdownFeature]:
        """Feature instances for the current configuration, in pipeline order."""
        return self._features_for(self._config)

    def parse(self, text: str, base_style: StyleDescriptor | None = None) -> StyledSequence:
        """Parse inline markup in ``text`` into styled runs.

        Never raises for malformed markup; unmatched or invalid spans are kept
        as literal text.

        Args:
            text: Raw text, e.g. a chat message or display name
            base_style: Style every run starts from (defaults to no style)

        Returns:
            Runs in display order; always at least one run
        """
        config = self._config
        style = base_style if base_style is not None else EMPTY_STYLE
        sequence: StyledSequence = [StyledRun(text, style)]
        if not config.enabled:
            return sequence

        for feature in self._features_for(config):
            if not feature.enabled:
                continue
            try:
                sequence = feature.apply(sequence)
            except Exception:  # noqa: BLE001 - parse must always return runs
                logger.exception("feature failed, passing text through", extra=feature.log_extra)

        logger.debug("parsed %r into %d runs", text, len(sequence))
        return sequence

    def _features_for(self, config: MarkupConfig) -> list[MarkdownFeature]:
        cached = self._features
        if cached is not None and cached[0] is config:
            return cached[1]

        palette = config.palette_colors
        features: list[MarkdownFeature] = []
        for name, feature_type in FEATURE_TYPES.items():
            settings = config.features[name]
            features.append(
                feature_type(
                    settings.prefix,
                    settings.suffix,
                    enabled=settings.enabled,
                    palette=palette,
                )
            )
        self._features = (config, features)
        return features


class FeatureSwitch:
    """Chainable enable/disable calls for individual features."""

    def __init__(self, pipeline: MarkdownPipeline, *, enabled: bool) -> None:
        self._pipeline = pipeline
        self._enabled = enabled

    def feature(self, name: FeatureName | str) -> FeatureSwitch:
        self._pipeline.set_feature_enabled(coerce_feature_name(name), self._enabled)
        return self

    def bold(self) -> FeatureSwitch:
        return self.feature(FeatureName.BOLD)

    def italic(self) -> FeatureSwitch:
        return self.feature(FeatureName.ITALIC)

    def underline(self) -> FeatureSwitch:
        return self.feature(FeatureName.UNDERLINE)

    def strikethrough(self) -> FeatureSwitch:
        return self.feature(FeatureName.STRIKETHROUGH)

    def spoiler(self) -> FeatureSwitch:
        return self.feature(FeatureName.SPOILER)

    def hyperlink(self) -> FeatureSwitch:
        return self.feature(FeatureName.HYPERLINK)

    def color(self) -> FeatureSwitch:
        return self.feature(FeatureName.COLOR)

    def gradient(self) -> FeatureSwitch:
        return self.feature(FeatureName.GRADIENT)

    def copy_to_clipboard(self) -> FeatureSwitch:
        return self.feature(FeatureName.COPY_TO_CLIPBOARD)


class _Default:
    """Holder for the process-wide default pipeline."""

    def __init__(self) -> None:
        self.pipeline = MarkdownPipeline()


# Singleton instance
_default = _Default()


def get_default_pipeline() -> MarkdownPipeline:
    """Get the process-wide default pipeline."""
    return _default.pipeline


def reset_default_pipeline(config: MarkupConfig | None = None) -> None:
    """Replace the default pipeline with a freshly configured one."""
    _default.pipeline = MarkdownPipeline(config)


def parse(text: str, base_style: StyleDescriptor | None = None) -> StyledSequence:
    """Parse ``text`` with the default pipeline."""
    return _default.pipeline.parse(text, base_style)


def set_global_enabled(enabled: bool) -> None:
    """Switch formatting on or off for the default pipeline."""
    _default.pipeline.set_global_enabled(enabled)


def set_feature_enabled(name: FeatureName | str, enabled: bool) -> None:
    """Switch one feature on or off for the default pipeline."""
    _default.pipeline.set_feature_enabled(name, enabled)


def set_delimiters(name: FeatureName | str, prefix: str, suffix: str) -> None:
    """Override one feature's delimiters for the default pipeline."""
    _default.pipeline.set_delimiters(name, prefix, suffix)


def enable_for() -> FeatureSwitch:
    """Fluent enable helper for the default pipeline."""
    return _default.pipeline.enable_for()


def disable_for() -> FeatureSwitch:
    """Fluent disable helper for the default pipeline."""
    return _default.pipeline.disable_for()
