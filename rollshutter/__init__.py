"""RollShutter: rolling shutter image synthesis from numbered frame sequences.

Main components:
- core: file masks, frame discovery, slice compositing (ShutterConfig, composite)
- codecs: frame decoding/encoding and scanline map storage
- generators: end-to-end generation (ShutterGenerator)
"""

__version__ = "0.1.0"

from .core import (
    ShutterConfig,
    Direction,
    FrameTemplate,
    locate,
    locate_frames,
    composite,
    frame_indices,
    RollingShutterError,
    ConfigError,
    MalformedTemplateError,
    NoFramesFoundError,
    DecodeError,
    DimensionMismatchError,
    EmptySequenceError,
    EncodeError,
)
from .codecs import FrameLoader, ImageWriter, ScanlineMapCodec
from .generators import ShutterGenerator

__all__ = [
    # Core
    "ShutterConfig",
    "Direction",
    "FrameTemplate",
    "locate",
    "locate_frames",
    "composite",
    "frame_indices",
    # Errors
    "RollingShutterError",
    "ConfigError",
    "MalformedTemplateError",
    "NoFramesFoundError",
    "DecodeError",
    "DimensionMismatchError",
    "EmptySequenceError",
    "EncodeError",
    # Codecs
    "FrameLoader",
    "ImageWriter",
    "ScanlineMapCodec",
    # Generators
    "ShutterGenerator",
]
