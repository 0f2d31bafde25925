"""Length-prefix framing.

A framed buffer is a 4-byte big-endian unsigned integer followed by the
payload. The integer is opaque here: callers decide whether it counts bytes
or, as the bitmask codec does, bits.
"""

from __future__ import annotations

import struct
from typing import NamedTuple, Union

from ..exceptions import FramingError, InputTooShortError

BytesLike = Union[bytes, bytearray, memoryview]

LENGTH_PREFIX = struct.Struct(">I")
LENGTH_PREFIX_SIZE = LENGTH_PREFIX.size
MAX_LENGTH = 0xFFFFFFFF


class LengthPrefixed(NamedTuple):
    """Decoded length prefix and the payload that follows it."""

    length: int
    payload: bytes


def add_length_prefix(payload: BytesLike, length: int) -> bytes:
    """Prepend a 4-byte big-endian length field to a payload.

    ``length`` is not required to equal ``len(payload)``; it is stored as-is.

    Args:
        payload: Bytes to frame (may be empty)
        length: Unsigned 32-bit value to store in the prefix

    Returns:
        ``4 + len(payload)`` bytes

    Raises:
        FramingError: If length does not fit in 32 unsigned bits

    Example:
        >>> add_length_prefix(b"abc", 3)
        b'\\x00\\x00\\x00\\x03abc'
    """
    if not 0 <= length <= MAX_LENGTH:
        raise FramingError(f"Length must be 0-{MAX_LENGTH}, got {length}")

    return LENGTH_PREFIX.pack(length) + bytes(payload)


def split_length_prefix(buffer: BytesLike) -> LengthPrefixed:
    """Split a framed buffer into its length prefix and payload.

    The payload is returned as an owned copy, so it stays valid independently
    of ``buffer``. The length is not checked against the payload size.

    Args:
        buffer: Framed data

    Returns:
        ``LengthPrefixed(length, payload)``

    Raises:
        InputTooShortError: If buffer holds fewer than 4 bytes

    Example:
        >>> length, payload = split_length_prefix(b"\\x00\\x00\\x00\\x03abc")
        >>> length, payload
        (3, b'abc')
    """
    if len(buffer) < LENGTH_PREFIX_SIZE:
        raise InputTooShortError(len(buffer), LENGTH_PREFIX_SIZE)

    (length,) = LENGTH_PREFIX.unpack_from(buffer, 0)
    return LengthPrefixed(length, bytes(buffer[LENGTH_PREFIX_SIZE:]))
