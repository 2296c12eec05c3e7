"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_window() -> bytes:
    """Eight-byte read-only window used by the read examples."""
    return bytes([0x00, 0x00, 0x01, 0x01, 0xAB, 0xCD, 0xEF, 0x89])


@pytest.fixture
def zero_buffer() -> bytearray:
    """Eight zeroed writable bytes."""
    return bytearray(8)
