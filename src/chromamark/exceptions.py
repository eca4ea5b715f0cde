"""Custom exceptions for chromamark."""


class ChromamarkError(Exception):
    """Base exception for all chromamark errors."""

    pass


class ConfigurationError(ChromamarkError, ValueError):
    """Raised when a configuration call or value is rejected."""

    pass


class ConfigFileError(ConfigurationError):
    """Raised when a YAML configuration file cannot be read or validated."""

    pass
