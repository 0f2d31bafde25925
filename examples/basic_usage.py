#!/usr/bin/env python3
"""Basic usage example for bitshrink.

This example demonstrates:
1. Encoding a set of identifiers as a length-prefixed bitmask
2. Storing the result as base64 text
3. Strict limits for untrusted input
"""

from __future__ import annotations

from bitshrink import (
    BitmaskLimits,
    IdentifierSet,
    IdentifierTooLargeError,
    decode_bitmask,
    decode_from_base64,
    encode_bitmask,
    encode_to_base64,
    encoded_size,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("bitshrink Basic Usage Example")
    print("=" * 60)

    # 1. Encode identifiers
    enabled_features = [1, 3, 5, 12]
    data = encode_bitmask(enabled_features)
    print(f"\nIdentifiers: {enabled_features}")
    print(f"Encoded ({len(data)} bytes): {data.hex()}")
    print(f"Predicted size: {encoded_size(enabled_features)} bytes")

    # 2. Text-safe storage
    text = encode_to_base64(data)
    print(f"\nBase64: {text}")
    print(f"Decoded: {decode_bitmask(decode_from_base64(text))}")

    # 3. Pydantic model
    selection = IdentifierSet(ids=[12, 5, 3, 1, 5])
    print(f"\nIdentifierSet: {selection.ids}")
    print(f"Round trip: {IdentifierSet.from_base64(selection.to_base64()).ids}")

    # 4. Strict limits
    limits = BitmaskLimits(max_identifier=255)
    try:
        encode_bitmask([1, 1_000_000], limits=limits)
    except IdentifierTooLargeError as e:
        print(f"\nRejected: {e}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
