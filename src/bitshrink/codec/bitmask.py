"""Bitmask encoding of small non-negative integer identifiers.

Identifier ``n`` maps to bit ``n % 8`` of byte ``n // 8`` (least significant
bit first). The encoded form is the mask framed with a 4-byte big-endian
prefix holding the number of significant bits (``max_id + 1``), not the
number of mask bytes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from ..config import BitmaskLimits
from ..exceptions import IdentifierTooLargeError, InvalidIdentifierError
from ..framing.basic import MAX_LENGTH, BytesLike, add_length_prefix, split_length_prefix

logger = logging.getLogger(__name__)


def _check_limits(ids: list[int], limits: BitmaskLimits) -> None:
    for identifier in ids:
        if identifier < 0:
            raise InvalidIdentifierError(identifier)
        if identifier > limits.max_identifier:
            raise IdentifierTooLargeError(identifier, limits.max_identifier)


def pack_bits(ids: Iterable[int]) -> bytes:
    """Pack identifiers into a bare LSB-first bitmask (no length prefix).

    The mask is ``ceil((max_id + 1) / 8)`` bytes long. An empty input is
    treated as ``max_id = 0`` and yields a single zero byte.

    Args:
        ids: Non-negative identifiers; duplicates and order are irrelevant

    Returns:
        Packed bitmask bytes

    Example:
        >>> pack_bits([1, 3, 5])
        b'*'
    """
    ids = list(ids)
    max_id = max(ids, default=0)
    bits_needed = max_id + 1
    mask = bytearray((bits_needed + 7) // 8)

    for identifier in ids:
        mask[identifier // 8] |= 1 << (identifier % 8)

    return bytes(mask)


def unpack_bits(mask: BytesLike, bit_length: Optional[int] = None) -> list[int]:
    """Return the identifiers whose bits are set in a bare bitmask.

    Args:
        mask: LSB-first bitmask bytes
        bit_length: Only consider identifiers below this value. Defaults to
            every bit in the mask. Values past the end of the mask are
            ignored rather than read.

    Returns:
        Identifiers in ascending order
    """
    available = len(mask) * 8
    limit = available if bit_length is None else min(bit_length, available)

    ids: list[int] = []
    for byte_index in range((limit + 7) // 8):
        byte = mask[byte_index]
        if not byte:
            continue
        base = byte_index * 8
        for bit_position in range(8):
            identifier = base + bit_position
            if identifier >= limit:
                break
            if byte & (1 << bit_position):
                ids.append(identifier)

    return ids


def encode_bitmask(ids: Iterable[int], *, limits: Optional[BitmaskLimits] = None) -> bytes:
    """Encode a set of identifiers as a length-prefixed bitmask.

    Without ``limits`` identifiers are not validated: they must be
    non-negative, and the caller is responsible for keeping them small
    enough that the mask is a sensible size.

    Args:
        ids: Identifiers to encode (any iterable; duplicates are harmless)
        limits: Optional strict-mode limits

    Returns:
        ``[bit count (4 bytes, big-endian)][bitmask]``

    Raises:
        InvalidIdentifierError: If limits are given and an identifier is negative
        IdentifierTooLargeError: If an identifier exceeds ``limits.max_identifier``,
            or its bit count cannot be represented in the 4-byte prefix

    Example:
        >>> encode_bitmask([1, 3, 5])
        b'\\x00\\x00\\x00\\x06*'
    """
    ids = list(ids)
    if limits is not None:
        _check_limits(ids, limits)

    max_id = max(ids, default=0)
    # Bit count must fit the prefix; check before allocating the mask.
    if max_id >= MAX_LENGTH:
        raise IdentifierTooLargeError(max_id, MAX_LENGTH - 1)

    bits_needed = max_id + 1
    mask = pack_bits(ids)
    logger.debug(f"Encoded {len(ids)} identifiers into {bits_needed} bits ({len(mask)} bytes)")

    return add_length_prefix(mask, bits_needed)


def decode_bitmask(buffer: BytesLike) -> list[int]:
    """Decode a length-prefixed bitmask back into identifiers.

    A prefix declaring more bits than the mask holds is tolerated; identifiers
    beyond the end of the mask are simply absent from the result.

    Args:
        buffer: Output of ``encode_bitmask``

    Returns:
        Identifiers in ascending order

    Raises:
        InputTooShortError: If buffer holds fewer than 4 bytes

    Example:
        >>> decode_bitmask(b"\\x00\\x00\\x00\\x06*")
        [1, 3, 5]
    """
    bit_length, mask = split_length_prefix(buffer)

    if bit_length > len(mask) * 8:
        logger.debug(
            f"Bit length {bit_length} exceeds mask capacity of {len(mask) * 8} bits, "
            f"ignoring missing bytes"
        )

    return unpack_bits(mask, bit_length)
