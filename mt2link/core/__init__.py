"""
Low-level helpers shared by the parsing sub-packages: bit and byte access,
hex conversion, and the package exception hierarchy.
"""
from mt2link.core.binary import get_bit, hex_to_bytes, read_le_uint, to_hex
from mt2link.core.errors import CobsDecodeError, Mt2LinkError, UnknownNodeClassError, UnknownTypeError

__all__ = [
    "get_bit",
    "hex_to_bytes",
    "read_le_uint",
    "to_hex",
    "CobsDecodeError",
    "Mt2LinkError",
    "UnknownNodeClassError",
    "UnknownTypeError",
]
