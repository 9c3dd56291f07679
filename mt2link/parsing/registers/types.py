"""
Type registry for MT2 register payloads.

Two kinds of types exist:

- ``ScalarType``: fixed-width little-endian numbers.
- ``BitfieldType``: an ordered list of boolean flags. Flag ``i`` is bit ``i`` of
  the payload read as a little-endian integer, so flag 0 is the least
  significant bit of the first payload byte.

The catalog is closed; register tables refer to types by name and the names
are resolved once when the tables are built.
"""
from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Union

from mt2link.core.binary import get_bit, read_le_uint
from mt2link.core.errors import UnknownTypeError


class ScalarType(str, Enum):
    UINT8 = "uint8"
    UINT16 = "uint16"
    INT16 = "int16"
    UINT32 = "uint32"
    FLOAT32 = "float32"

    @property
    def size(self) -> int:
        return _SCALAR_FORMATS[self].size

    @property
    def kind(self) -> str:
        return "scalar"


@dataclass(frozen=True)
class BitfieldType:
    """
    A named set of boolean flags packed into consecutive bytes.

    Attributes:
        name: The firmware type name, e.g. ``"MT2_Slave_Status"``.
        flags: Flag names in bit order.
    """
    name: str
    flags: tuple[str, ...]

    @property
    def size(self) -> int:
        return math.ceil(len(self.flags) / 8)

    @property
    def kind(self) -> str:
        return "bitfield"

    def decode(self, payload: bytes) -> dict[str, bool]:
        if len(payload) < self.size:
            raise ValueError(f"Expected at least {self.size} bytes for bitfield")
        value = read_le_uint(payload, self.size)
        return {flag: get_bit(value, index) for index, flag in enumerate(self.flags)}


RegisterType = Union[ScalarType, BitfieldType]

_SCALAR_FORMATS: dict[ScalarType, struct.Struct] = {
    ScalarType.UINT8: struct.Struct("<B"),
    ScalarType.UINT16: struct.Struct("<H"),
    ScalarType.INT16: struct.Struct("<h"),
    ScalarType.UINT32: struct.Struct("<I"),
    ScalarType.FLOAT32: struct.Struct("<f"),
}


def _scalar_decoder(scalar: ScalarType, fmt: struct.Struct) -> Callable[[bytes], Union[int, float]]:
    def decode(payload: bytes) -> Union[int, float]:
        if len(payload) < fmt.size:
            raise ValueError(f"Expected at least {fmt.size} bytes for {scalar.value}")
        return fmt.unpack_from(bytes(payload[: fmt.size]))[0]

    return decode


SCALAR_DECODERS: Mapping[ScalarType, Callable[[bytes], Union[int, float]]] = MappingProxyType(
    {scalar: _scalar_decoder(scalar, fmt) for scalar, fmt in _SCALAR_FORMATS.items()}
)


def _bitfield(name: str, *flags: str) -> tuple[str, BitfieldType]:
    return name, BitfieldType(name=name, flags=tuple(flags))


BITFIELD_TYPES: Mapping[str, BitfieldType] = MappingProxyType(dict([
    _bitfield(
        "MT2_Slave_Status",
        "alive", "arm_ready", "arm_active", "coils_nonzero", "shutdown_from_fault",
    ),
    _bitfield(
        "MT2_Slave_Faults",
        "temp_fault", "current_spike_fault", "vsense_fault", "invalid_value_fault", "communication_fault",
    ),
    _bitfield("MT2_Global_State", "global_arm", "global_fault_clear"),
    _bitfield("MT2_Slave_Settings", "identify", "local_fault_clear"),
    _bitfield(
        "MT2_Master_HvSwitchStatus",
        "hv_relay_on", "precharge_ssr_on", "shdn_12_on", "fault_12", "hv_shutdown_from_fault", "hv_ready",
    ),
    _bitfield("MT2_Master_UsbInterfaceStatus", "vendor_active", "cdc_active"),
    _bitfield(
        "MT2_Master_PowerSystemFaults",
        "ov_5v", "uv_5v", "oc_5v",
        "ov_12v", "uv_12v", "oc_12v",
        "ov_hv", "uv_hv", "oc_hv",
        "efuse_12v_fault", "master_overtemp", "precharge_fault", "slave_fault", "communication_fault",
    ),
]))

# Firmware headers spell float32 as "float".
_TYPE_ALIASES = {"float": ScalarType.FLOAT32}


def resolve_type(name: str) -> RegisterType:
    """
    Look up a register type by its firmware name.

    Args:
        name: A scalar name (``"uint16"``, ``"float"``...) or a bitfield name.

    Returns:
        The matching ``ScalarType`` or ``BitfieldType``.

    Raises:
        UnknownTypeError: If the name is not in the registry.
    """
    if name in BITFIELD_TYPES:
        return BITFIELD_TYPES[name]
    if name in _TYPE_ALIASES:
        return _TYPE_ALIASES[name]
    try:
        return ScalarType(name)
    except ValueError:
        raise UnknownTypeError(f"Unknown register type '{name}'") from None


def type_name(register_type: object) -> str:
    if isinstance(register_type, BitfieldType):
        return register_type.name
    if isinstance(register_type, ScalarType):
        return register_type.value
    return str(register_type)


__all__ = [
    "BITFIELD_TYPES",
    "BitfieldType",
    "RegisterType",
    "SCALAR_DECODERS",
    "ScalarType",
    "resolve_type",
    "type_name",
]
