from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from mt2link.parsing.registers.decode import DecodedRecord
from mt2link.parsing.registers.maps import NodeClass


@dataclass
class FrameSnapshot:
    raw: bytes
    raw_hex: str
    received_at: datetime
    node_class: NodeClass
    message: bytes = b""
    record: Optional[DecodedRecord] = None
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors and self.record is not None and self.record.ok

    def as_dict(self) -> dict[str, Any]:
        return {
            "raw": self.raw_hex,
            "received_at": self.received_at.isoformat(),
            "node_class": self.node_class.value,
            "message": self.message.hex(" "),
            "record": self.record.as_dict() if self.record else None,
            "warnings": list(self.warnings),
            "errors": list(self.errors),
        }
