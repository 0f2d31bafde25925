"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing."""
    return b"Hello, bitmask world!"


@pytest.fixture
def sample_ids() -> list[int]:
    """Sample identifier set for testing."""
    return [1, 3, 5]


@pytest.fixture
def sample_encoded() -> bytes:
    """Encoded form of ``sample_ids``."""
    return b"\x00\x00\x00\x06\x2a"
