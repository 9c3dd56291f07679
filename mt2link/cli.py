"""
Command line entry point.

``mt2link decode`` decodes hex frames given as arguments (or one per line on
stdin) and prints one JSON object per frame. ``mt2link serve`` starts the
HTTP decode server.
"""
from __future__ import annotations

import argparse
import json
import sys
from typing import Iterable, List, Optional, TextIO

from mt2link.core.binary import hex_to_bytes
from mt2link.parsing.frames import build_frame_snapshot
from mt2link.parsing.registers.maps import NodeClass


def _iter_frames(frames: List[str], stdin: TextIO) -> Iterable[str]:
    if frames:
        yield from frames
        return
    for line in stdin:
        line = line.strip()
        if line and not line.startswith("#"):
            yield line


def run_decode(args: argparse.Namespace, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    status = 0
    for text in _iter_frames(args.frames, stdin):
        try:
            raw = hex_to_bytes(text)
        except ValueError as exc:
            print(json.dumps({"input": text, "errors": [str(exc)]}), file=stdout)
            status = 1
            continue
        snapshot = build_frame_snapshot(raw, args.node, stuffed=not args.raw)
        out = snapshot.as_dict()
        out.pop("received_at")
        print(json.dumps(out), file=stdout)
        if snapshot.errors:
            status = 1
    return status


def run_serve(args: argparse.Namespace) -> int:
    from mt2link.decode_server import DecodeServer
    from mt2link.server_app import ServerSettings

    server = DecodeServer(ServerSettings(server_ip=args.ip, server_port=args.port))
    server.start()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mt2link", description="Decode MT2 serial link frames.")
    sub = parser.add_subparsers(dest="command", required=True)

    decode = sub.add_parser("decode", help="Decode hex frames from arguments or stdin.")
    decode.add_argument("frames", nargs="*", help="Hex-encoded frames without the 0x00 delimiter.")
    decode.add_argument(
        "--node",
        choices=[n.value for n in NodeClass],
        default=NodeClass.TILE.value,
        help="Register map to decode against.",
    )
    decode.add_argument("--raw", action="store_true", help="Frames are already unstuffed messages.")
    decode.set_defaults(func=run_decode)

    serve = sub.add_parser("serve", help="Start the HTTP decode server.")
    serve.add_argument("--ip", type=str, default="127.0.0.1", help="IP address to bind the server to.")
    serve.add_argument("--port", type=int, default=10290, help="Port to run the server on.")
    serve.set_defaults(func=run_serve)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
