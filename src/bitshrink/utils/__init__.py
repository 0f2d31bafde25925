"""Utility functions for bitshrink.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import base64_size, bitmask_bits, bitmask_size, encoded_size

__all__ = [
    "bitmask_bits",
    "bitmask_size",
    "encoded_size",
    "base64_size",
]
