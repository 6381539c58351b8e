"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator
from typing import Any

import pytest
import structlog

from cells import CellsMatrix, build


@pytest.fixture
def defaults() -> dict[str, Any]:
    """Defaults for a small people table."""
    return {"name": "unknown", "age": 0, "city": None}


@pytest.fixture
def records() -> list[dict[str, Any]]:
    """Heterogeneous records: missing keys, nulls and different key orders."""
    return [
        {"age": 36, "name": "Ada", "city": "London"},
        {"name": "Linus"},
        {"name": None, "age": 52, "city": None},
        {"city": "Delft", "age": 19},
    ]


@pytest.fixture
def matrix(records: list[dict[str, Any]], defaults: dict[str, Any]) -> CellsMatrix:
    """Matrix built from the sample records with default column order."""
    return build(records, defaults)


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after tests that configure logging."""
    yield
    structlog.reset_defaults()
