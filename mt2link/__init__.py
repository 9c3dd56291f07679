from mt2link.core.errors import CobsDecodeError, Mt2LinkError, UnknownNodeClassError, UnknownTypeError
from mt2link.parsing.cobs import cobs_decode, cobs_encode
from mt2link.parsing.frames import build_frame_snapshot, decode_frame, FrameSnapshot, split_frames
from mt2link.parsing.registers import (
    decode_master_message,
    decode_message,
    decode_tile_message,
    DecodedRecord,
    MASTER_REGISTERS,
    Message,
    NodeClass,
    TILE_REGISTERS,
)
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "cobs_decode",
    "cobs_encode",
    "build_frame_snapshot",
    "decode_frame",
    "FrameSnapshot",
    "split_frames",
    "decode_master_message",
    "decode_message",
    "decode_tile_message",
    "DecodedRecord",
    "MASTER_REGISTERS",
    "Message",
    "NodeClass",
    "TILE_REGISTERS",
    "CobsDecodeError",
    "Mt2LinkError",
    "UnknownNodeClassError",
    "UnknownTypeError",
]

try:
    __version__ = version("mt2link")
except PackageNotFoundError:
    __version__ = "0.0.0"
