"""
COBS byte-stuffing for the zero-delimited MT2 serial link.

``encode`` and ``decode`` are aliases of :func:`cobs_encode` and
:func:`cobs_decode` for callers that import the sub-package as a codec.
"""
from mt2link.core.errors import CobsDecodeError
from mt2link.parsing.cobs.decode import (
    cobs_decode,
    cobs_encode,
    FRAME_DELIMITER,
    MAX_RUN_LENGTH,
)

encode = cobs_encode
decode = cobs_decode

__all__ = [
    "cobs_decode",
    "cobs_encode",
    "decode",
    "encode",
    "CobsDecodeError",
    "FRAME_DELIMITER",
    "MAX_RUN_LENGTH",
]
