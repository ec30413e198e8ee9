"""Shared console fixtures for unit and integration tests."""

from typing import Callable, List

import pytest


@pytest.fixture
def scripted() -> Callable[..., Callable[[], str]]:
    """Factory for input functions replaying lines then raising EOFError."""

    def _factory(*lines: str) -> Callable[[], str]:
        remaining = list(lines)

        def _input() -> str:
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        return _input

    return _factory


@pytest.fixture
def output() -> List[str]:
    """Collected console output."""
    return []
