"""RollShutter Core: frame discovery and slice compositing."""

from .config import ShutterConfig
from .direction import Direction
from .template import FrameTemplate
from .locator import locate, locate_frames
from .compositor import composite, frame_indices
from .errors import (
    RollingShutterError,
    ConfigError,
    MalformedTemplateError,
    NoFramesFoundError,
    DecodeError,
    DimensionMismatchError,
    EmptySequenceError,
    EncodeError,
)

__all__ = [
    "ShutterConfig",
    "Direction",
    "FrameTemplate",
    "locate",
    "locate_frames",
    "composite",
    "frame_indices",
    "RollingShutterError",
    "ConfigError",
    "MalformedTemplateError",
    "NoFramesFoundError",
    "DecodeError",
    "DimensionMismatchError",
    "EmptySequenceError",
    "EncodeError",
]
