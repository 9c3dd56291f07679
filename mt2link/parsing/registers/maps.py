"""
Register maps for the two MT2 node classes.

Tile (coil-driver slave) and master registers live in separate namespaces: the
same register id can mean different things on each node class.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from mt2link.core.errors import UnknownNodeClassError
from mt2link.parsing.registers.types import RegisterType, resolve_type, type_name


@dataclass(frozen=True)
class RegisterEntry:
    name: str
    type: RegisterType


RegisterMap = Mapping[int, RegisterEntry]


class NodeClass(str, Enum):
    TILE = "tile"
    MASTER = "master"


def build_register_map(table: Mapping[int, tuple[str, str]]) -> RegisterMap:
    """
    Build a read-only register map from ``{register_id: (name, type_name)}``.

    Type names are resolved here, once, so decoding never looks types up by
    string.

    Raises:
        ValueError: If a register id does not fit in one byte.
        UnknownTypeError: If a type name is not in the type registry.
    """
    entries: dict[int, RegisterEntry] = {}
    for register_id, (name, type_ref) in table.items():
        if not 0 <= register_id <= 0xFF:
            raise ValueError(f"register id must be a single byte, got {register_id}")
        entries[register_id] = RegisterEntry(name=name, type=resolve_type(type_ref))
    return MappingProxyType(entries)


def _coil_block(base: int, suffix: str, type_ref: str) -> dict[int, tuple[str, str]]:
    return {base + i: (f"coil_{i + 1}_{suffix}", type_ref) for i in range(9)}


TILE_REGISTERS: RegisterMap = build_register_map({
    0x04: ("slave_status", "MT2_Slave_Status"),
    0x05: ("slave_faults", "MT2_Slave_Faults"),
    0x06: ("global_state", "MT2_Global_State"),
    0x07: ("slave_settings", "MT2_Slave_Settings"),

    0x08: ("v_sense_5", "float"),
    0x09: ("v_sense_12", "float"),
    0x0A: ("v_sense_hv", "float"),
    0x0B: ("mcu_temp", "uint16"),

    0x0C: ("adj_west_addr", "uint8"),
    0x0D: ("adj_north_addr", "uint8"),
    0x0E: ("adj_east_addr", "uint8"),
    0x0F: ("adj_south_addr", "uint8"),

    **_coil_block(0x10, "setpoint", "uint16"),
    **_coil_block(0x20, "current_reading", "uint16"),
    **_coil_block(0x30, "temp", "int16"),
})

MASTER_REGISTERS: RegisterMap = build_register_map({
    0x10: ("power_switch_status", "MT2_Master_HvSwitchStatus"),
    0x11: ("power_system_faults", "MT2_Master_PowerSystemFaults"),
    0x12: ("usb_interface_status", "MT2_Master_UsbInterfaceStatus"),
    0x13: ("global_state", "MT2_Global_State"),

    0x20: ("hv_active", "uint8"),
    0x21: ("clear_faults_requested", "uint8"),

    0x30: ("mcu_temp", "int16"),
    0x31: ("v_sense_5", "float"),
    0x32: ("v_sense_12_in", "float"),
    0x33: ("v_sense_12", "float"),
    0x34: ("v_sense_hv_in", "float"),
    0x35: ("v_sense_hv", "float"),
    0x36: ("i_sense_5", "float"),
    0x37: ("i_sense_12", "float"),
    0x38: ("i_sense_hv", "float"),
})

REGISTER_MAPS: Mapping[NodeClass, RegisterMap] = MappingProxyType({
    NodeClass.TILE: TILE_REGISTERS,
    NodeClass.MASTER: MASTER_REGISTERS,
})


def resolve_node_class(node_class: NodeClass | str) -> NodeClass:
    if isinstance(node_class, NodeClass):
        return node_class
    try:
        return NodeClass(str(node_class).strip().lower())
    except ValueError:
        available = [n.value for n in NodeClass]
        raise UnknownNodeClassError(
            f"Unknown node class '{node_class}'. Available: {available}"
        ) from None


def register_map_for(node_class: NodeClass | str) -> RegisterMap:
    return REGISTER_MAPS[resolve_node_class(node_class)]


def register_ids(register_map: RegisterMap) -> dict[str, int]:
    """Reverse mapping: register name -> register id."""
    return {entry.name: register_id for register_id, entry in register_map.items()}


def describe_register_map(register_map: RegisterMap) -> list[dict[str, Any]]:
    """
    Flatten a register map into rows for listing tools and the HTTP API.

    Rows are sorted by register id.
    """
    return [
        {
            "register": register_id,
            "name": entry.name,
            "type": type_name(entry.type),
            "kind": entry.type.kind,
            "size": entry.type.size,
        }
        for register_id, entry in sorted(register_map.items())
    ]
