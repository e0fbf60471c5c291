"""Rolling shutter job configuration."""

from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional, Dict, Any, Union

import yaml

from .direction import Direction
from .errors import ConfigError

BACKENDS = ("pil", "cv2")


@dataclass
class ShutterConfig:
    """Settings for a single rolling shutter synthesis.

    Paths are kept as strings so the config round-trips through YAML unchanged.
    """
    template: str = ""
    output: str = ""
    direction: str = "N"  # N | S | W | E, a numeral 0-3 or a direction name
    start: int = 0
    workers: int = 1
    backend: str = "pil"  # "pil" | "cv2"
    mode: Optional[str] = None  # Pillow mode to convert frames to, e.g. "RGB"
    map_path: Optional[str] = None  # scanline map sidecar (.npy)
    progress: bool = True

    @property
    def sweep(self) -> Direction:
        return Direction.parse(self.direction)

    def validate(self) -> "ShutterConfig":
        """Check values; raise ConfigError on the first problem found."""
        self._check_types()
        if not self.template:
            raise ConfigError("A file mask is required")
        if not self.output:
            raise ConfigError("An output path is required")
        Direction.parse(self.direction)
        if self.start < 0:
            raise ConfigError(f"Start index must be non-negative, got {self.start}")
        if self.workers < 1:
            raise ConfigError(f"Workers must be at least 1, got {self.workers}")
        if self.backend not in BACKENDS:
            raise ConfigError(f"Unknown backend '{self.backend}'; expected one of {', '.join(BACKENDS)}")
        if self.mode is not None and self.backend != "pil":
            raise ConfigError("Mode conversion is only supported by the pil backend")
        return self

    def _check_types(self) -> None:
        # YAML hands over whatever scalar was written; bool is an int subclass
        for name in ("start", "workers"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigError(f"'{name}' must be an integer, got {value!r}")
        for name in ("template", "output", "backend", "direction"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigError(f"'{name}' must be a string, got {value!r}")
        for name in ("mode", "map_path"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"'{name}' must be a string, got {value!r}")
        if not isinstance(self.progress, bool):
            raise ConfigError(f"'progress' must be true or false, got {self.progress!r}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ShutterConfig":
        valid_keys = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in d.items() if k in valid_keys}
        if "direction" in filtered:
            filtered["direction"] = str(filtered["direction"])
        for key in ("template", "output", "map_path"):
            if isinstance(filtered.get(key), Path):
                filtered[key] = str(filtered[key])
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "ShutterConfig":
        """Load a config from a YAML mapping of field names to values."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not read config {path}: {e}") from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must contain a mapping, got {type(data).__name__}")
        return cls.from_dict(data)
