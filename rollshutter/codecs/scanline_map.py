"""Scanline map encoding/decoding for storage."""

import numpy as np
from pathlib import Path
from typing import Dict, Any, List, Optional, Sequence, Union


class ScanlineMapCodec:
    """Encode/decode the scanline-to-frame map of a composite to/from .npy.

    Format: Single .npy file containing a dict with:
        - indices: [S] source frame position per scanline
        - direction: direction value, e.g. "top-to-bottom"
        - frame_paths: paths of the frames, in sequence order
        - shape: canvas shape
        - meta: additional metadata
    """

    VERSION = 1

    @classmethod
    def encode(
        cls,
        indices: np.ndarray,
        direction: str,
        frame_paths: Optional[Sequence[str]] = None,
        shape: Optional[Sequence[int]] = None,
        meta: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Encode a scanline map to a dict for saving.

        Args:
            indices: [S] source frame position for each scanline
            direction: sweep direction value
            frame_paths: source frame paths
            shape: canvas shape
            meta: additional metadata

        Returns:
            dict ready for np.save
        """
        indices = np.asarray(indices)
        if indices.ndim != 1:
            raise ValueError(f"indices must be 1-D, got shape {indices.shape}")

        data = {
            "version": cls.VERSION,
            "indices": indices.astype(np.int32),
            "direction": str(direction),
        }

        if frame_paths is not None:
            data["frame_paths"] = [str(p) for p in frame_paths]

        if shape is not None:
            data["shape"] = [int(d) for d in shape]

        if meta is not None:
            data["meta"] = meta

        return data

    @classmethod
    def decode(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Decode a scanline map from a loaded dict."""
        result = {
            "indices": data["indices"].astype(np.int64),
            "direction": data["direction"],
            "frame_paths": list(data.get("frame_paths", [])),
            "version": data.get("version", 0),
        }

        if "shape" in data:
            result["shape"] = tuple(data["shape"])

        if "meta" in data:
            result["meta"] = data["meta"]

        return result

    @classmethod
    def save(cls, path: Union[str, Path], **kwargs) -> None:
        """Save a scanline map to .npy file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        data = cls.encode(**kwargs)
        # file handle keeps np.save from appending ".npy" to other suffixes
        with open(path, "wb") as f:
            np.save(f, data, allow_pickle=True)

    @classmethod
    def load(cls, path: Union[str, Path]) -> Dict[str, Any]:
        """Load a scanline map from .npy file."""
        data = np.load(path, allow_pickle=True).item()
        return cls.decode(data)

    @staticmethod
    def source_paths(decoded: Dict[str, Any]) -> List[str]:
        """Frame path each scanline was copied from."""
        paths = decoded["frame_paths"]
        return [paths[i] for i in decoded["indices"]]
