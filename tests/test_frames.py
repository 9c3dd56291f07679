"""Tests for the frame pipeline: stream splitting, unstuffing and snapshots."""
import datetime as dt

import pytest

from mt2link.core.errors import CobsDecodeError, UnknownNodeClassError
from mt2link.parsing.cobs import cobs_encode
from mt2link.parsing.frames import build_frame_snapshot, decode_frame, split_frames
from mt2link.parsing.registers import NodeClass


def _frame(message: bytes) -> bytes:
    return cobs_encode(message)


def test_decode_frame_tile():
    record = decode_frame(_frame(bytes([0x0B, 0x34, 0x12])), "tile")
    assert record.name == "mcu_temp"
    assert record.value == 0x1234


def test_decode_frame_payload_with_zero():
    # hv_active = 0 needs a stuffed zero
    frame = _frame(bytes([0x20, 0x00]))
    assert 0 not in frame
    record = decode_frame(frame, NodeClass.MASTER)
    assert record.name == "hv_active"
    assert record.value == 0


def test_decode_frame_framing_error_propagates():
    with pytest.raises(CobsDecodeError):
        decode_frame(bytes([0x05, 0x01, 0x02]), "tile")


def test_decode_frame_short_message_returns_none():
    assert decode_frame(_frame(bytes([0x04])), "tile") is None


def test_decode_frame_unknown_node_class():
    with pytest.raises(UnknownNodeClassError):
        decode_frame(_frame(bytes([0x04, 0x01])), "psu")


def test_split_frames():
    stream = _frame(b"\x0c\x01") + b"\x00" + b"\x00" + _frame(b"\x0d\x02") + b"\x00" + b"\x02\x0e"
    frames, remainder = split_frames(stream)
    assert frames == [_frame(b"\x0c\x01"), _frame(b"\x0d\x02")]
    assert remainder == b"\x02\x0e"


def test_split_frames_empty():
    assert split_frames(b"") == ([], b"")


def test_snapshot_success():
    received = dt.datetime(2024, 1, 1, tzinfo=dt.timezone.utc)
    snapshot = build_frame_snapshot(_frame(bytes([0x04, 0x01])), "tile", received_at=received)
    assert snapshot.ok
    assert snapshot.received_at == received
    assert snapshot.node_class is NodeClass.TILE
    assert snapshot.message == bytes([0x04, 0x01])
    assert snapshot.record.value["alive"] is True
    assert snapshot.errors == []
    assert snapshot.warnings == []


def test_snapshot_framing_error_is_captured():
    snapshot = build_frame_snapshot(bytes([0x00]), "tile")
    assert not snapshot.ok
    assert snapshot.record is None
    assert snapshot.errors[0].startswith("framing_failed:")


def test_snapshot_register_error_is_warning():
    snapshot = build_frame_snapshot(_frame(bytes([0xFE, 0x00])), "tile")
    assert snapshot.errors == []
    assert snapshot.warnings == ["register_error: Unknown register 254"]
    assert snapshot.record.error == "Unknown register 254"


def test_snapshot_short_message_warning():
    snapshot = build_frame_snapshot(_frame(bytes([0x04])), "master")
    assert snapshot.record is None
    assert snapshot.warnings == ["message_too_short"]


def test_snapshot_unstuffed_input():
    snapshot = build_frame_snapshot(bytes([0x20, 0x01]), "master", stuffed=False)
    assert snapshot.record.as_dict() == {"register": 0x20, "name": "hv_active", "value": 1}


def test_snapshot_as_dict():
    snapshot = build_frame_snapshot(_frame(bytes([0x0C, 0x05])), "tile")
    data = snapshot.as_dict()
    assert data["node_class"] == "tile"
    assert data["raw"] == "03 0c 05"
    assert data["message"] == "0c 05"
    assert data["record"] == {"register": 0x0C, "name": "adj_west_addr", "value": 5}


def test_snapshot_unknown_node_class_raises():
    with pytest.raises(UnknownNodeClassError, match="psu"):
        build_frame_snapshot(bytes([0x03, 0x04, 0x01]), "psu")
