"""Bitmask codec for bitshrink.

This module packs sets of small non-negative identifiers into dense,
length-prefixed bitmasks and unpacks them again.
"""

from __future__ import annotations

from .bitmask import decode_bitmask, encode_bitmask, pack_bits, unpack_bits

__all__ = [
    "encode_bitmask",
    "decode_bitmask",
    "pack_bits",
    "unpack_bits",
]
