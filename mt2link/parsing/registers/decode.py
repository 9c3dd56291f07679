"""
Decoder turning one unstuffed MT2 message into a named register value.

Message layout: ``[register_id] [payload...]``. The payload layout depends
only on the register entry found for ``register_id`` in the chosen map.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from mt2link.parsing.registers.maps import MASTER_REGISTERS, RegisterMap, TILE_REGISTERS
from mt2link.parsing.registers.types import BitfieldType, SCALAR_DECODERS

RegisterValue = Union[int, float, dict[str, bool], list[int]]


@dataclass(frozen=True)
class Message:
    register_id: int
    payload: bytes = b""

    def __post_init__(self) -> None:
        if not 0 <= self.register_id <= 0xFF:
            raise ValueError(f"register id must be a single byte, got {self.register_id}")

    @classmethod
    def from_bytes(cls, data: bytes) -> Optional["Message"]:
        """Split raw message bytes; ``None`` when there is no payload byte."""
        if not isinstance(data, (bytes, bytearray, memoryview)) or len(data) < 2:
            return None
        raw = bytes(data)
        return cls(register_id=raw[0], payload=raw[1:])

    def to_bytes(self) -> bytes:
        return bytes([self.register_id]) + bytes(self.payload)


@dataclass(frozen=True)
class DecodedRecord:
    """
    Result of decoding one message.

    A record either carries ``name`` and ``value`` or carries ``error``; the
    latter is used for unknown registers and undersized payloads so a stream
    of messages can keep being processed.

    Attributes:
        register: The register id from the message.
        name: The register name, or ``None`` for error records.
        value: A number, a flag mapping, or raw payload bytes.
        error: A description of why the payload could not be decoded.
    """
    register: int
    name: Optional[str] = None
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_dict(self) -> dict[str, Any]:
        if self.error is not None:
            return {"register": self.register, "error": self.error}
        return {"register": self.register, "name": self.name, "value": self.value}


def decode_message(message: Union[Message, bytes], register_map: RegisterMap) -> Optional[DecodedRecord]:
    """
    Decode a message against a register map.

    Args:
        message: A ``Message`` or the raw (already unstuffed) message bytes.
        register_map: ``TILE_REGISTERS``, ``MASTER_REGISTERS`` or a map built
            with ``build_register_map``.

    Returns:
        ``None`` if the input is too short to hold a register id and one
        payload byte, otherwise a ``DecodedRecord`` (possibly with ``error``).
    """
    if isinstance(message, Message):
        if not message.payload:
            return None
    else:
        message = Message.from_bytes(message)
        if message is None:
            return None

    register_id = message.register_id
    payload = message.payload

    entry = register_map.get(register_id)
    if entry is None:
        return DecodedRecord(register=register_id, error=f"Unknown register {register_id}")

    register_type = entry.type
    if isinstance(register_type, BitfieldType):
        decoder = register_type.decode
    else:
        decoder = SCALAR_DECODERS.get(register_type)
        if decoder is None:
            return DecodedRecord(register=register_id, name=entry.name, value=list(payload))

    try:
        value: RegisterValue = decoder(payload)
    except ValueError as exc:
        return DecodedRecord(register=register_id, error=str(exc))

    return DecodedRecord(register=register_id, name=entry.name, value=value)


def decode_tile_message(message: Union[Message, bytes]) -> Optional[DecodedRecord]:
    return decode_message(message, TILE_REGISTERS)


def decode_master_message(message: Union[Message, bytes]) -> Optional[DecodedRecord]:
    return decode_message(message, MASTER_REGISTERS)
