"""Unit tests for length-prefix framing."""

from __future__ import annotations

import pytest

from bitshrink.exceptions import BitshrinkError, FramingError, InputTooShortError
from bitshrink.framing import (
    LENGTH_PREFIX_SIZE,
    MAX_LENGTH,
    LengthPrefixed,
    add_length_prefix,
    split_length_prefix,
)


class TestAddLengthPrefix:
    """Test prepending the length field."""

    def test_prefix_layout(self, sample_payload: bytes) -> None:
        """Test big-endian prefix followed by an exact payload copy."""
        framed = add_length_prefix(sample_payload, len(sample_payload))

        assert len(framed) == LENGTH_PREFIX_SIZE + len(sample_payload)
        assert framed[:4] == len(sample_payload).to_bytes(4, "big")
        assert framed[4:] == sample_payload

    def test_big_endian_byte_order(self) -> None:
        """Test the most significant byte comes first."""
        assert add_length_prefix(b"", 0x01020304) == b"\x01\x02\x03\x04"

    def test_empty_payload(self) -> None:
        """Test framing an empty payload."""
        assert add_length_prefix(b"", 0) == b"\x00\x00\x00\x00"

    def test_length_is_opaque(self) -> None:
        """Test length need not match the payload size."""
        framed = add_length_prefix(b"\xff", 6)

        assert framed == b"\x00\x00\x00\x06\xff"

    def test_max_length(self) -> None:
        """Test the largest 32-bit length."""
        assert add_length_prefix(b"", MAX_LENGTH) == b"\xff\xff\xff\xff"

    def test_accepts_bytearray_and_memoryview(self) -> None:
        """Test bytes-like payloads."""
        assert add_length_prefix(bytearray(b"ab"), 2) == b"\x00\x00\x00\x02ab"
        assert add_length_prefix(memoryview(b"ab"), 2) == b"\x00\x00\x00\x02ab"

    def test_length_out_of_range(self) -> None:
        """Test lengths outside 32 unsigned bits are rejected."""
        with pytest.raises(FramingError, match="Length must be"):
            add_length_prefix(b"", MAX_LENGTH + 1)

        with pytest.raises(FramingError, match="Length must be"):
            add_length_prefix(b"", -1)


class TestSplitLengthPrefix:
    """Test splitting the length field from the payload."""

    def test_split(self) -> None:
        """Test reading the prefix and payload."""
        result = split_length_prefix(b"\x00\x00\x00\x03abc")

        assert isinstance(result, LengthPrefixed)
        assert result.length == 3
        assert result.payload == b"abc"

    def test_tuple_unpacking(self) -> None:
        """Test the result unpacks like a tuple."""
        length, payload = split_length_prefix(b"\x00\x00\x01\x00xyz")

        assert length == 256
        assert payload == b"xyz"

    def test_exactly_four_bytes(self) -> None:
        """Test a bare prefix yields an empty payload."""
        length, payload = split_length_prefix(b"\x00\x00\x00\x09")

        assert length == 9
        assert payload == b""

    def test_length_not_validated(self) -> None:
        """Test a prefix larger than the payload is returned unchanged."""
        length, payload = split_length_prefix(b"\x00\x00\x00\x10short")

        assert length == 16
        assert payload == b"short"

    def test_payload_is_owned_copy(self) -> None:
        """Test the payload does not alias a mutable input buffer."""
        buffer = bytearray(b"\x00\x00\x00\x02ab")
        _, payload = split_length_prefix(buffer)
        buffer[4] = ord("z")

        assert isinstance(payload, bytes)
        assert payload == b"ab"

    def test_memoryview_input(self) -> None:
        """Test splitting a memoryview."""
        assert split_length_prefix(memoryview(b"\x00\x00\x00\x01q")) == (1, b"q")


class TestFramingErrors:
    """Test framing error handling."""

    @pytest.mark.parametrize("data", [b"", b"\x00", b"\x00\x01", b"\x00\x00\x00"])
    def test_input_too_short(self, data: bytes) -> None:
        """Test buffers shorter than the prefix."""
        with pytest.raises(InputTooShortError, match="too short") as exc_info:
            split_length_prefix(data)

        assert exc_info.value.size == len(data)
        assert exc_info.value.required == 4

    def test_error_hierarchy(self) -> None:
        """Test InputTooShortError is catchable as FramingError and BitshrinkError."""
        with pytest.raises(FramingError):
            split_length_prefix(b"\x00\x00\x00")

        with pytest.raises(BitshrinkError):
            split_length_prefix(b"\x00\x00\x00")
