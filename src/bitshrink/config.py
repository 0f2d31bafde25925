"""Validation limits for the bitmask codec.

The default codec path performs no validation: identifiers are a caller
precondition. Passing a ``BitmaskLimits`` instance switches on strict checks
without changing the wire format.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .framing.basic import MAX_LENGTH

# 2**20 identifiers -> 128 KiB mask
DEFAULT_MAX_IDENTIFIER = (1 << 20) - 1

MAX_IDENTIFIER_ENV = "BITSHRINK_MAX_IDENTIFIER"


@dataclass(frozen=True)
class BitmaskLimits:
    """Strict-mode limits for ``encode_bitmask``.

    Attributes:
        max_identifier: Largest identifier accepted (default 2**20 - 1).
            The encoded bit count is ``max_identifier + 1`` and must fit in
            the 32-bit length prefix.

    Examples:
        ```python
        from bitshrink import BitmaskLimits, encode_bitmask

        limits = BitmaskLimits(max_identifier=1023)
        data = encode_bitmask([1, 3, 5], limits=limits)
        ```
    """

    max_identifier: int = DEFAULT_MAX_IDENTIFIER

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_identifier < 0:
            raise ValueError(f"max_identifier must be >= 0, got {self.max_identifier}")

        if self.max_identifier >= MAX_LENGTH:
            raise ValueError(
                f"max_identifier must be < {MAX_LENGTH} to fit the length prefix, "
                f"got {self.max_identifier}"
            )

    @classmethod
    def from_env(cls) -> BitmaskLimits:
        """Create limits using environment overrides.

        Reads ``BITSHRINK_MAX_IDENTIFIER``; unset, unparsable or out-of-range
        values fall back to the default.
        """
        raw = os.getenv(MAX_IDENTIFIER_ENV)
        try:
            max_identifier = int(raw) if raw is not None else DEFAULT_MAX_IDENTIFIER
        except ValueError:
            max_identifier = DEFAULT_MAX_IDENTIFIER
        if not 0 <= max_identifier < MAX_LENGTH:
            max_identifier = DEFAULT_MAX_IDENTIFIER
        return cls(max_identifier=max_identifier)
