"""Shared pytest fixtures."""
from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_logging_and_config() -> Iterator[None]:
    """Undo structlog and settings state left behind by CLI invocations."""
    from codedeploy_ops.cli.config import clear_config_cache

    clear_config_cache()
    yield
    structlog.reset_defaults()
    clear_config_cache()
