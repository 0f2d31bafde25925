"""Exception hierarchy for bitshrink.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BitshrinkError for easy catching of any bitshrink-specific error.
"""

from __future__ import annotations


class BitshrinkError(Exception):
    """Base exception for all bitshrink errors."""

    pass


class FramingError(BitshrinkError):
    """Raised when length-prefix framing operations fail.

    Examples:
        - Length value does not fit in the 4-byte prefix
        - Buffer too short to contain a prefix
    """

    pass


class InputTooShortError(FramingError):
    """Raised when a buffer is shorter than the 4-byte length prefix."""

    def __init__(self, size: int, required: int = 4) -> None:
        self.size = size
        self.required = required
        super().__init__(
            f"Input is too short to contain a length prefix: "
            f"need {required} bytes, got {size} bytes"
        )


class EncodeError(BitshrinkError):
    """Raised when encoding an identifier set fails.

    Only raised when strict limits are in effect, see ``BitmaskLimits``.
    """

    pass


class InvalidIdentifierError(EncodeError):
    """Raised when an identifier is negative."""

    def __init__(self, identifier: int) -> None:
        self.identifier = identifier
        super().__init__(f"Identifiers must be non-negative, got {identifier}")


class IdentifierTooLargeError(EncodeError):
    """Raised when an identifier exceeds the configured maximum."""

    def __init__(self, identifier: int, max_identifier: int) -> None:
        self.identifier = identifier
        self.max_identifier = max_identifier
        super().__init__(f"Identifier {identifier} exceeds maximum of {max_identifier}")


class DecodeError(BitshrinkError):
    """Raised when decoding data fails.

    Examples:
        - Malformed base64 text
        - Non-ASCII characters in encoded text
    """

    pass


class InvalidEncodingError(DecodeError):
    """Raised when text is not valid padded base64."""

    pass
