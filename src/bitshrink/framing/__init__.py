"""Message framing utilities for bitshrink.

This module provides the 4-byte big-endian length-prefix convention shared by
the bitmask codec and external payload producers.
"""

from __future__ import annotations

from .basic import (
    LENGTH_PREFIX_SIZE,
    MAX_LENGTH,
    LengthPrefixed,
    add_length_prefix,
    split_length_prefix,
)

__all__ = [
    "LENGTH_PREFIX_SIZE",
    "MAX_LENGTH",
    "LengthPrefixed",
    "add_length_prefix",
    "split_length_prefix",
]
