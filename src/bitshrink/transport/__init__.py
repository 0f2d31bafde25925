"""Text-safe transport encodings for bitshrink."""

from __future__ import annotations

from .text import decode_from_base64, encode_to_base64

__all__ = [
    "encode_to_base64",
    "decode_from_base64",
]
