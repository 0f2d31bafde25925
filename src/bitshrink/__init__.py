"""bitshrink: Compact bitmask encoding for identifier sets

A small binary encoding toolkit that packs sets of small non-negative integer
identifiers into dense bitmasks, frames binary payloads with a 4-byte
big-endian length prefix, and adapts binary payloads to base64 text for
storage backends that only accept strings.

Wire format:
- Framed buffer: [length (4 bytes, big-endian)] [payload]
- Bitmask: framed buffer whose length is the number of significant bits
  (max_id + 1), with identifier n stored in bit n % 8 of byte n // 8

Quick Start:
    >>> from bitshrink import decode_bitmask, encode_bitmask, encode_to_base64
    >>>
    >>> data = encode_bitmask([1, 3, 5])
    >>> data
    b'\\x00\\x00\\x00\\x06*'
    >>> decode_bitmask(data)
    [1, 3, 5]
    >>> encode_to_base64(data)
    'AAAABio='
"""

from __future__ import annotations

import logging

from .codec import decode_bitmask, encode_bitmask, pack_bits, unpack_bits
from .config import DEFAULT_MAX_IDENTIFIER, BitmaskLimits
from .exceptions import (
    BitshrinkError,
    DecodeError,
    EncodeError,
    FramingError,
    IdentifierTooLargeError,
    InputTooShortError,
    InvalidEncodingError,
    InvalidIdentifierError,
)
from .framing import (
    LENGTH_PREFIX_SIZE,
    MAX_LENGTH,
    LengthPrefixed,
    add_length_prefix,
    split_length_prefix,
)
from .models import Identifier, IdentifierSet
from .transport import decode_from_base64, encode_to_base64
from .utils import base64_size, bitmask_bits, bitmask_size, encoded_size

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Framing
    "LENGTH_PREFIX_SIZE",
    "MAX_LENGTH",
    "LengthPrefixed",
    "add_length_prefix",
    "split_length_prefix",
    # Bitmask codec
    "encode_bitmask",
    "decode_bitmask",
    "pack_bits",
    "unpack_bits",
    # Transport
    "encode_to_base64",
    "decode_from_base64",
    # Models
    "Identifier",
    "IdentifierSet",
    # Configuration
    "BitmaskLimits",
    "DEFAULT_MAX_IDENTIFIER",
    # Exceptions
    "BitshrinkError",
    "FramingError",
    "InputTooShortError",
    "EncodeError",
    "InvalidIdentifierError",
    "IdentifierTooLargeError",
    "DecodeError",
    "InvalidEncodingError",
    # Sizing
    "bitmask_bits",
    "bitmask_size",
    "encoded_size",
    "base64_size",
    # Version
    "__version__",
]
