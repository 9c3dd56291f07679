from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, HTTPException

from mt2link.core.binary import hex_to_bytes
from mt2link.core.errors import UnknownNodeClassError
from mt2link.parsing.cobs import cobs_encode
from mt2link.parsing.frames import build_frame_snapshot
from mt2link.parsing.registers.maps import describe_register_map, register_map_for, resolve_node_class
from mt2link.server_app.config import ServerSettings, get_settings
from mt2link.server_app.logging import create_logger, ring_buffer
from mt2link.server_app.models import (
    DecodeRequest,
    DecodeResponse,
    EncodeRequest,
    EncodeResponse,
    LogsResponse,
    RegisterInfo,
    RegistersResponse,
)


def _parse_hex(text: str, settings: ServerSettings) -> bytes:
    try:
        data = hex_to_bytes(text)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    if len(data) > settings.max_frame_size:
        raise HTTPException(
            status_code=413,
            detail=f"Frame of {len(data)} bytes exceeds limit of {settings.max_frame_size}",
        )
    return data


def create_app(settings: Optional[ServerSettings] = None) -> FastAPI:
    settings = settings or get_settings()
    logger = create_logger("mt2link.server", settings.log_ring_size)
    app = FastAPI(title="mt2link decode server")
    app.state.settings = settings
    app.state.logger = logger

    @app.post("/decode", response_model=DecodeResponse)
    def decode(req: DecodeRequest) -> DecodeResponse:
        raw = _parse_hex(req.frame, settings)
        node_class = req.node_class or settings.default_node_class
        snapshot = build_frame_snapshot(raw, node_class, stuffed=req.stuffed)
        details = {"node_class": node_class.value, "frame": snapshot.raw_hex}
        if snapshot.errors:
            logger.warning("framing_failed", extra={"details": {**details, "errors": snapshot.errors}})
        elif snapshot.warnings:
            logger.info("frame_rejected", extra={"details": {**details, "warnings": snapshot.warnings}})
        else:
            logger.info("frame_decoded", extra={"details": {**details, "record": snapshot.record.as_dict()}})
        return DecodeResponse(
            node_class=node_class,
            message=snapshot.message.hex(),
            record=snapshot.record.as_dict() if snapshot.record else None,
            warnings=snapshot.warnings,
            errors=snapshot.errors,
        )

    @app.post("/encode", response_model=EncodeResponse)
    def encode(req: EncodeRequest) -> EncodeResponse:
        data = _parse_hex(req.data, settings)
        return EncodeResponse(frame=cobs_encode(data).hex())

    @app.get("/registers/{node_class}", response_model=RegistersResponse)
    def registers(node_class: str) -> RegistersResponse:
        try:
            node = resolve_node_class(node_class)
        except UnknownNodeClassError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        rows = describe_register_map(register_map_for(node))
        return RegistersResponse(node_class=node, registers=[RegisterInfo(**row) for row in rows])

    @app.get("/logs", response_model=LogsResponse)
    def logs() -> LogsResponse:
        handler = ring_buffer(logger)
        return LogsResponse(events=handler.get_events() if handler else [])

    return app
