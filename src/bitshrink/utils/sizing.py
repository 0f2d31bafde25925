"""Encoded size calculation utilities.

These functions report how large an encoded identifier set will be without
actually encoding it.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..framing.basic import LENGTH_PREFIX_SIZE


def bitmask_bits(ids: Iterable[int]) -> int:
    """Number of significant bits stored in the length prefix.

    Example:
        >>> bitmask_bits([1, 3, 5])
        6
        >>> bitmask_bits([])
        1
    """
    return max(ids, default=0) + 1


def bitmask_size(ids: Iterable[int]) -> int:
    """Size in bytes of the bare bitmask (without prefix).

    Example:
        >>> bitmask_size([8])
        2
    """
    return (bitmask_bits(ids) + 7) // 8


def encoded_size(ids: Iterable[int]) -> int:
    """Size in bytes of ``encode_bitmask(ids)``.

    Example:
        >>> encoded_size([1, 3, 5])
        5
    """
    return LENGTH_PREFIX_SIZE + bitmask_size(ids)


def base64_size(ids: Iterable[int]) -> int:
    """Length in characters of the padded base64 text of the encoded bitmask.

    Example:
        >>> base64_size([1, 3, 5])
        8
    """
    return 4 * ((encoded_size(ids) + 2) // 3)
