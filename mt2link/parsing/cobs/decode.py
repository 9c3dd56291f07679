"""
COBS (Consistent Overhead Byte Stuffing) codec for the MT2 serial link.

Every frame on the wire is the COBS encoding of one message followed by a
single ``0x00`` delimiter. The encoded form never contains ``0x00``::

    [code] [code - 1 data bytes] [code] [code - 1 data bytes] ... 0x00

A code below ``0xFF`` means the run was terminated by a zero byte (implied,
not transmitted) unless it is the last run of the frame. Code ``0xFF`` marks a
full 254-byte run that continues into the next run without a zero.
"""
from __future__ import annotations

from mt2link.core.errors import CobsDecodeError

# Longest run of non-zero bytes a single code byte can describe.
MAX_RUN_LENGTH = 254
FRAME_DELIMITER = 0x00


def cobs_encode(data: bytes) -> bytes:
    """
    Byte-stuff ``data`` so it contains no ``0x00``.

    The frame delimiter is not appended.

    Args:
        data: The raw message bytes.

    Returns:
        The encoded bytes.
    """
    out = bytearray([0])
    code_idx = 0
    code = 1

    for byte in bytes(data):
        if byte == 0:
            out[code_idx] = code
            code_idx = len(out)
            out.append(0)
            code = 1
            continue
        out.append(byte)
        code += 1
        if code == MAX_RUN_LENGTH + 1:
            out[code_idx] = code
            code_idx = len(out)
            out.append(0)
            code = 1

    out[code_idx] = code
    return bytes(out)


def cobs_decode(framed: bytes) -> bytes:
    """
    Reverse :func:`cobs_encode`.

    Args:
        framed: One frame with the ``0x00`` delimiter already removed.

    Returns:
        The original message bytes.

    Raises:
        CobsDecodeError: If a code byte is zero or a run is truncated.
    """
    data = bytes(framed)
    out = bytearray()
    i = 0
    while i < len(data):
        code = data[i]
        i += 1
        if code == 0:
            raise CobsDecodeError(f"Malformed COBS input: zero code byte at offset {i - 1}")
        if i + code - 1 > len(data):
            raise CobsDecodeError(
                f"Malformed COBS input: run at offset {i - 1} declares {code - 1} bytes, "
                f"only {len(data) - i} available"
            )
        out += data[i: i + code - 1]
        i += code - 1
        if code < 0xFF and i < len(data):
            out.append(0)
    return bytes(out)
