"""Tests for the register type registry (scalars, bitfields, name resolution)."""
import math

import pytest

from mt2link.core.errors import UnknownTypeError
from mt2link.parsing.registers.types import (
    BITFIELD_TYPES,
    BitfieldType,
    resolve_type,
    SCALAR_DECODERS,
    ScalarType,
)


def test_scalar_sizes():
    assert [s.size for s in ScalarType] == [1, 2, 2, 4, 4]


def test_uint16_little_endian():
    assert SCALAR_DECODERS[ScalarType.UINT16](bytes([0x34, 0x12])) == 0x1234


def test_int16_negative():
    assert SCALAR_DECODERS[ScalarType.INT16](bytes([0xFE, 0xFF])) == -2


def test_uint32_little_endian():
    assert SCALAR_DECODERS[ScalarType.UINT32](bytes([0x78, 0x56, 0x34, 0x12])) == 0x12345678


def test_float32_little_endian():
    # 1.5f == 0x3FC00000
    assert SCALAR_DECODERS[ScalarType.FLOAT32](bytes([0x00, 0x00, 0xC0, 0x3F])) == 1.5


def test_scalar_ignores_trailing_bytes():
    assert SCALAR_DECODERS[ScalarType.UINT8](bytes([0x2A, 0xFF, 0xFF])) == 42


def test_scalar_too_short():
    with pytest.raises(ValueError, match="Expected at least 4 bytes for float32"):
        SCALAR_DECODERS[ScalarType.FLOAT32](bytes([0x00, 0x00]))


def test_bitfield_size():
    assert BITFIELD_TYPES["MT2_Global_State"].size == 1
    assert BITFIELD_TYPES["MT2_Master_PowerSystemFaults"].size == 2
    for bitfield in BITFIELD_TYPES.values():
        assert bitfield.size == math.ceil(len(bitfield.flags) / 8)


def test_bitfield_decode_order():
    bitfield = BitfieldType(name="test", flags=("alive", "arm_ready", "arm_active"))
    assert bitfield.decode(bytes([0b00000101])) == {
        "alive": True,
        "arm_ready": False,
        "arm_active": True,
    }


def test_bitfield_ignores_unused_high_bits():
    bitfield = BITFIELD_TYPES["MT2_Global_State"]
    assert bitfield.decode(bytes([0xFC])) == {"global_arm": False, "global_fault_clear": False}


def test_multibyte_bitfield_little_endian():
    faults = BITFIELD_TYPES["MT2_Master_PowerSystemFaults"]
    # bit 0 (ov_5v) in byte 0, bit 13 (communication_fault) in byte 1
    value = faults.decode(bytes([0x01, 0x20]))
    assert value["ov_5v"] is True
    assert value["communication_fault"] is True
    assert sum(value.values()) == 2
    assert list(value) == list(faults.flags)


def test_bitfield_too_short():
    with pytest.raises(ValueError, match="Expected at least 2 bytes for bitfield"):
        BITFIELD_TYPES["MT2_Master_PowerSystemFaults"].decode(bytes([0x01]))


def test_resolve_type_names():
    assert resolve_type("uint16") is ScalarType.UINT16
    assert resolve_type("float") is ScalarType.FLOAT32
    assert resolve_type("float32") is ScalarType.FLOAT32
    assert resolve_type("MT2_Slave_Status") is BITFIELD_TYPES["MT2_Slave_Status"]


def test_resolve_unknown_type():
    with pytest.raises(UnknownTypeError, match="double"):
        resolve_type("double")


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        BITFIELD_TYPES["new"] = BitfieldType(name="new", flags=("a",))
