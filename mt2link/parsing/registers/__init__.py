"""
Typed register decoding for MT2 messages.

A message is a register id byte followed by a payload. The register id is
looked up in the tile or master register map, which gives the register's
name and its type from the type registry (little-endian scalars or named
bitfields).
"""
from mt2link.parsing.registers.decode import (
    decode_master_message,
    decode_message,
    decode_tile_message,
    DecodedRecord,
    Message,
)
from mt2link.parsing.registers.maps import (
    build_register_map,
    describe_register_map,
    MASTER_REGISTERS,
    NodeClass,
    register_ids,
    register_map_for,
    REGISTER_MAPS,
    RegisterEntry,
    resolve_node_class,
    TILE_REGISTERS,
)
from mt2link.parsing.registers.types import (
    BITFIELD_TYPES,
    BitfieldType,
    resolve_type,
    SCALAR_DECODERS,
    ScalarType,
)

__all__ = [
    "decode_master_message",
    "decode_message",
    "decode_tile_message",
    "DecodedRecord",
    "Message",
    "build_register_map",
    "describe_register_map",
    "MASTER_REGISTERS",
    "NodeClass",
    "register_ids",
    "register_map_for",
    "REGISTER_MAPS",
    "RegisterEntry",
    "resolve_node_class",
    "TILE_REGISTERS",
    "BITFIELD_TYPES",
    "BitfieldType",
    "resolve_type",
    "SCALAR_DECODERS",
    "ScalarType",
]
