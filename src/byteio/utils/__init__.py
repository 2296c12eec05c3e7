"""Utility functions for byteio.

This module provides window size calculation helpers.
"""

from __future__ import annotations

from .sizing import check_window, element_count, encoded_size

__all__ = [
    "encoded_size",
    "element_count",
    "check_window",
]
