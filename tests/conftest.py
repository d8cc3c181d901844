"""Shared fixtures for the prime hunter test suite."""

import io

import pytest

from prime_progress import ProgressState


@pytest.fixture()
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def state() -> ProgressState:
    return ProgressState()
