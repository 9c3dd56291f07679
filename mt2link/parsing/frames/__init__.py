from mt2link.parsing.frames.decode import build_frame_snapshot, decode_frame, split_frames
from mt2link.parsing.frames.model import FrameSnapshot

__all__ = ["build_frame_snapshot", "decode_frame", "split_frames", "FrameSnapshot"]
