"""Shared fixtures for cronfmt tests."""

import pytest
from typer.testing import CliRunner

from loguru import logger


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def valid_args() -> list[str]:
    """Six arguments that expand without error."""
    return ["*/15", "0", "1,15", "*", "1-5", "/usr/bin/find / -type f .terraform"]


@pytest.fixture(autouse=True)
def _reset_logger():
    """CLI runs replace loguru sinks; restore a clean state afterwards."""
    yield
    logger.remove()
