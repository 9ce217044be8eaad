"""
Shared pytest setup for the packages/ tests.

Thread-heavy tests are tagged ``@pytest.mark.stress``. They take seconds
rather than milliseconds, so they only run when STRESS_TESTS=1.
"""
from __future__ import annotations

import os

import pytest

STRESS_ENABLED = os.environ.get("STRESS_TESTS", "").lower() in ("1", "true", "yes")


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "stress: many threads and iterations; enable with STRESS_TESTS=1")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if STRESS_ENABLED:
        return
    skip = pytest.mark.skip(reason="set STRESS_TESTS=1 to run")
    for item in items:
        if item.get_closest_marker("stress") is not None:
            item.add_marker(skip)
