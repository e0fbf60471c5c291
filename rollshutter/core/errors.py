"""Error taxonomy for rolling shutter synthesis."""

from pathlib import Path
from typing import Tuple, Union


class RollingShutterError(Exception):
    """Base class for all fatal errors raised by rollshutter."""


class ConfigError(RollingShutterError):
    """Invalid configuration value."""


class MalformedTemplateError(RollingShutterError):
    """File mask has no integer placeholder, or more than one."""

    def __init__(self, mask: str, reason: str):
        self.mask = mask
        self.reason = reason
        super().__init__(f"Could not parse file mask '{mask}': {reason}")


class NoFramesFoundError(RollingShutterError):
    """The locator produced an empty sequence."""

    def __init__(self, mask: str, start: int = 0):
        self.mask = mask
        self.start = start
        super().__init__(f"No frames found for file mask '{mask}' starting at index {start}")


class DecodeError(RollingShutterError):
    """A frame could not be opened or decoded."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = Path(path)
        msg = f"Could not open image {self.path}"
        super().__init__(f"{msg}: {reason}" if reason else msg)


class DimensionMismatchError(RollingShutterError):
    """A frame differs from the first frame in size, channels or depth."""

    def __init__(self, expected: Tuple, actual: Tuple, where: str = ""):
        self.expected = expected
        self.actual = actual
        prefix = f"{where}: " if where else ""
        super().__init__(f"{prefix}frame layout {actual} does not match {expected}")


class EmptySequenceError(RollingShutterError):
    """Composition was asked to run on zero frames."""

    def __init__(self):
        super().__init__("Cannot composite an empty frame sequence")


class EncodeError(RollingShutterError):
    """The output image could not be written."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = Path(path)
        msg = f"Could not save image {self.path}"
        super().__init__(f"{msg}: {reason}" if reason else msg)
