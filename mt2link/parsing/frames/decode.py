from __future__ import annotations

import datetime as dt
from typing import Optional, Tuple

from mt2link.core.binary import to_hex
from mt2link.core.errors import CobsDecodeError
from mt2link.parsing.cobs import cobs_decode, FRAME_DELIMITER
from mt2link.parsing.frames.model import FrameSnapshot
from mt2link.parsing.registers.decode import decode_message, DecodedRecord
from mt2link.parsing.registers.maps import NodeClass, register_map_for, resolve_node_class


def split_frames(buffer: bytes) -> Tuple[list[bytes], bytes]:
    """
    Split a zero-delimited byte stream into still-stuffed frames.

    Empty frames (back-to-back delimiters) are dropped.

    Args:
        buffer: Bytes read from the link, possibly ending mid-frame.

    Returns:
        The complete frames and the trailing bytes of an unfinished frame.
    """
    parts = bytes(buffer).split(bytes([FRAME_DELIMITER]))
    remainder = parts.pop()
    return [part for part in parts if part], remainder


def decode_frame(raw_frame: bytes, node_class: NodeClass | str) -> Optional[DecodedRecord]:
    """
    Unstuff one frame and decode the message it carries.

    Raises:
        CobsDecodeError: If the frame's byte-stuffing is corrupt.
        UnknownNodeClassError: If ``node_class`` is not ``tile`` or ``master``.
    """
    register_map = register_map_for(node_class)
    return decode_message(cobs_decode(raw_frame), register_map)


def build_frame_snapshot(
    raw_frame: bytes,
    node_class: NodeClass | str,
    received_at: dt.datetime | None = None,
    stuffed: bool = True,
) -> FrameSnapshot:
    """
    Decode one frame into a ``FrameSnapshot`` without raising on bad frame content.

    Framing errors land in ``snapshot.errors``; unknown registers, undersized
    payloads and too-short messages land in ``snapshot.warnings``.

    Args:
        raw_frame: One frame without the ``0x00`` delimiter.
        node_class: Register map to decode against.
        received_at: Receive time; defaults to now (UTC).
        stuffed: ``False`` when ``raw_frame`` is already an unstuffed message.

    Raises:
        UnknownNodeClassError: If ``node_class`` is not ``tile`` or ``master``.
    """
    node = resolve_node_class(node_class)
    raw = bytes(raw_frame)
    snapshot = FrameSnapshot(
        raw=raw,
        raw_hex=to_hex(raw),
        received_at=received_at or dt.datetime.now(dt.timezone.utc),
        node_class=node,
    )

    if stuffed:
        try:
            snapshot.message = cobs_decode(raw)
        except CobsDecodeError as exc:
            snapshot.errors.append(f"framing_failed: {exc}")
            return snapshot
    else:
        snapshot.message = raw

    record = decode_message(snapshot.message, register_map_for(node))
    if record is None:
        snapshot.warnings.append("message_too_short")
    elif not record.ok:
        snapshot.warnings.append(f"register_error: {record.error}")
    snapshot.record = record
    return snapshot
