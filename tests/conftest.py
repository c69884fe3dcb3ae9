"""Pytest fixtures for gridprint tests."""

import pytest

from gridprint import PrinterConfig
from tests.fixtures.tables import DATA, HEADERS


@pytest.fixture
def headers() -> list[str]:
    """Column headers shared by most table tests."""
    return list(HEADERS)


@pytest.fixture
def data() -> list[list[str | None]]:
    """Four rows with a long name and two absent ages."""
    return [list(row) for row in DATA]


@pytest.fixture
def config() -> PrinterConfig:
    """Default printer configuration."""
    return PrinterConfig()
