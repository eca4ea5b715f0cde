"""Pytest configuration and fixtures for chromamark tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from chromamark import context
from chromamark.logger import reset_logger
from chromamark.models import StyledRun, StyledSequence
from chromamark.pipeline import MarkdownPipeline, reset_default_pipeline


@pytest.fixture(autouse=True)
def clean_state() -> Iterator[None]:
    """Reset the logger, default pipeline and CLI context around each test."""
    reset_logger()
    reset_default_pipeline()
    context.set_config_path(None)
    yield
    reset_logger()
    reset_default_pipeline()
    context.set_config_path(None)


@pytest.fixture
def pipeline() -> MarkdownPipeline:
    """A pipeline with the default configuration."""
    return MarkdownPipeline()


def texts(runs: StyledSequence) -> list[str]:
    """Text of each run, for compact assertions."""
    return [run.text for run in runs]


def single(text: str) -> StyledSequence:
    """A one-run unstyled sequence."""
    return [StyledRun(text)]
