"""
Shared test fixtures for transproc tests.

The process-wide registry is append-only and never reset, so tests that
register into it must use names no other test uses. ``unique_name`` hands
out such names; ``registry`` gives a fresh, isolated ``FunctionRegistry``
for tests that only need registry semantics.
"""

import itertools

import pytest

from transproc.registry import FunctionRegistry

_counter = itertools.count()


@pytest.fixture()
def registry() -> FunctionRegistry:
    return FunctionRegistry()


@pytest.fixture()
def unique_name(request) -> str:
    """A registry name derived from the test name, unique per call."""
    return f"{request.node.name}_{next(_counter)}"


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (exercises the process-wide registry)",
    )
