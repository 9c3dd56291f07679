"""Tests for hex helpers used by the CLI and the decode server."""
import pytest

from mt2link.core.binary import hex_to_bytes, to_hex


def test_hex_to_bytes_plain_and_separated():
    assert hex_to_bytes("0a0b") == b"\x0a\x0b"
    assert hex_to_bytes("0a 0b") == b"\x0a\x0b"
    assert hex_to_bytes("0a:0b") == b"\x0a\x0b"


def test_hex_to_bytes_prefix_per_token():
    assert hex_to_bytes("0x0a0b") == b"\x0a\x0b"
    assert hex_to_bytes("0x0a 0x0b") == b"\x0a\x0b"
    assert hex_to_bytes("0X0A:0x0B") == b"\x0a\x0b"


def test_hex_to_bytes_invalid():
    with pytest.raises(ValueError, match="Invalid hex frame"):
        hex_to_bytes("0xzz")


def test_to_hex():
    assert to_hex([0x03, 0x0C, 0x05]) == "03 0c 05"
