"""RollShutter Codecs: frame decode/encode and scanline map storage."""

from .image import FrameLoader, ImageWriter, load_frame, frame_layout
from .scanline_map import ScanlineMapCodec

__all__ = ["FrameLoader", "ImageWriter", "load_frame", "frame_layout", "ScanlineMapCodec"]
