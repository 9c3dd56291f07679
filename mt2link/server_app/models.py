from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from mt2link.parsing.registers.maps import NodeClass


class DecodeRequest(BaseModel):
    frame: str = Field(..., description="Hex-encoded frame without the 0x00 delimiter")
    node_class: Optional[NodeClass] = None
    stuffed: bool = True


class DecodeResponse(BaseModel):
    node_class: NodeClass
    message: str
    record: Optional[Dict[str, Any]] = None
    warnings: List[str] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)


class EncodeRequest(BaseModel):
    data: str = Field(..., description="Hex-encoded message bytes")


class EncodeResponse(BaseModel):
    frame: str


class RegisterInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    register_id: int = Field(..., alias="register")
    name: str
    type: str
    kind: str
    size: int


class RegistersResponse(BaseModel):
    node_class: NodeClass
    registers: List[RegisterInfo] = Field(default_factory=list)


class LogsResponse(BaseModel):
    events: List[Dict[str, Any]] = Field(default_factory=list)
