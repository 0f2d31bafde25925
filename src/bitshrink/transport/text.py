"""Base64 transport adapter.

For storage backends that only accept string values. Standard alphabet,
padded output, strict input.
"""

from __future__ import annotations

import base64
import binascii

from ..exceptions import InvalidEncodingError
from ..framing.basic import BytesLike


def encode_to_base64(data: BytesLike) -> str:
    """Encode bytes as padded standard base64 text.

    Example:
        >>> encode_to_base64(b"\\x00\\x00\\x00\\x06*")
        'AAAABio='
    """
    return base64.b64encode(data).decode("ascii")


def decode_from_base64(text: str) -> bytes:
    """Decode padded standard base64 text.

    Args:
        text: Base64 text

    Returns:
        Decoded bytes

    Raises:
        InvalidEncodingError: If text contains characters outside the base64
            alphabet, is incorrectly padded, or is not ASCII
    """
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncodingError(f"Invalid base64 input: {e}") from e
