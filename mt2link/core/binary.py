from __future__ import annotations

from typing import Iterable


def get_bit(value: int, bit_index: int) -> bool:
    if bit_index < 0:
        raise ValueError("bit_index must be non-negative")
    return bool((value >> bit_index) & 0x01)


def read_le_uint(data: bytes, num_bytes: int) -> int:
    """Combine the first ``num_bytes`` of ``data`` into an unsigned little-endian integer."""
    if len(data) < num_bytes:
        raise ValueError(f"need {num_bytes} bytes, got {len(data)}")
    return int.from_bytes(bytes(data[:num_bytes]), byteorder="little", signed=False)


def hex_to_bytes(text: str) -> bytes:
    # Accepts "0a0b", "0a 0b", "0a:0b"; each separated token may carry a 0x prefix.
    tokens = text.replace(":", " ").split()
    cleaned = "".join(t[2:] if t[:2].lower() == "0x" else t for t in tokens)
    try:
        return bytes.fromhex(cleaned)
    except ValueError as exc:
        raise ValueError(f"Invalid hex frame {text!r}: {exc}") from exc


def to_hex(data: bytes | Iterable[int]) -> str:
    return bytes(data).hex(" ")
