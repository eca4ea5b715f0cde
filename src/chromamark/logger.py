"""Logging for chromamark.

Two extra levels sit between the standard ones so ``-v`` can step through
them: MATCHES (one line per restyled span) and SCANS (one line per run a
feature looks at). Feature code passes ``extra={"feature": name}`` and
FeatureFormatter puts the name in front of the message::

    bold: matched '**a**'
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

MATCHES_LEVEL = 25  # INFO < MATCHES < WARNING
SCANS_LEVEL = 15  # DEBUG < SCANS < INFO

logging.addLevelName(MATCHES_LEVEL, "MATCHES")
logging.addLevelName(SCANS_LEVEL, "SCANS")

# -v count -> logger level
VERBOSITY_LEVELS = {
    0: logging.ERROR,
    1: MATCHES_LEVEL,
    2: SCANS_LEVEL,
    3: logging.DEBUG,
}


class ChromamarkLogger(logging.Logger):
    """Logger with one method per chromamark verbosity level."""

    def matches(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """A feature matched and restyled a span (-v 1)."""
        if self.isEnabledFor(MATCHES_LEVEL):
            self._log(MATCHES_LEVEL, msg, args, **kwargs)

    def scans(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """A feature scanned a run (-v 2)."""
        if self.isEnabledFor(SCANS_LEVEL):
            self._log(SCANS_LEVEL, msg, args, **kwargs)


class FeatureFormatter(logging.Formatter):
    """Prefixes records that carry a ``feature`` attribute with its name."""

    def __init__(self) -> None:
        super().__init__("%(message)s")

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        feature = getattr(record, "feature", None)
        return f"{feature}: {message}" if feature else message


def get_logger() -> ChromamarkLogger:
    """Return the shared ``chromamark`` logger."""
    logging.setLoggerClass(ChromamarkLogger)
    logger = logging.getLogger("chromamark")
    logging.setLoggerClass(logging.Logger)
    assert isinstance(logger, ChromamarkLogger)
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Send chromamark logs at ``verbosity`` to ``stream`` (stderr by default).

    Replaces any handler installed by an earlier call. Unknown verbosity
    values log errors only.
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(VERBOSITY_LEVELS.get(verbosity, logging.ERROR))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(FeatureFormatter())
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Drop handlers and hand records back to the root logger."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)
    logger.propagate = True


def debug_enabled() -> bool:
    return get_logger().isEnabledFor(logging.DEBUG)
