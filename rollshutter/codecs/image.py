"""Frame decoding and canvas encoding."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Iterable, List, Optional, Union

import cv2
import numpy as np
from PIL import Image
from tqdm import tqdm

from ..core.errors import DecodeError, DimensionMismatchError, EncodeError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _load_pil(path: PathLike, mode: Optional[str]) -> np.ndarray:
    try:
        with Image.open(path) as img:
            img.load()
            if mode is not None:
                img = img.convert(mode)
            elif img.mode == "P":
                img = img.convert("RGBA" if "transparency" in img.info else "RGB")
            elif img.mode == "PA":
                img = img.convert("RGBA")
            return np.array(img)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(path, str(e)) from e


def _load_cv2(path: PathLike) -> np.ndarray:
    try:
        img = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    except cv2.error as e:
        raise DecodeError(path, str(e)) from e
    if img is None:
        raise DecodeError(path, "unreadable or unsupported by OpenCV")
    if img.ndim == 3 and img.shape[2] == 3:
        img = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
    elif img.ndim == 3 and img.shape[2] == 4:
        img = cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    return img


def load_frame(path: PathLike, backend: str = "pil", mode: Optional[str] = None) -> np.ndarray:
    """Load a frame as [H, W, C] in its decoded dtype.

    Grayscale frames get a channel axis of size 1. Color frames are RGB(A)
    regardless of backend.
    """
    if backend == "pil":
        img = _load_pil(path, mode)
    elif backend == "cv2":
        img = _load_cv2(path)
    else:
        raise ValueError(f"Unknown backend: {backend}")
    if img.ndim == 2:
        img = img[:, :, None]
    return img


def frame_layout(frame: np.ndarray) -> tuple:
    """(W, H, C, dtype) of a decoded frame."""
    h, w = frame.shape[:2]
    c = frame.shape[2] if frame.ndim == 3 else 1
    return w, h, c, str(frame.dtype)


class FrameLoader:
    """Decode an ordered run of frames into uniform pixel buffers.

    The first frame defines the expected (W, H, C, dtype); any other layout
    raises DimensionMismatchError. With more than one worker, frames decode on
    a thread pool; results keep their index order and the first failure
    cancels the decodes that have not started yet.
    """

    def __init__(
        self,
        backend: str = "pil",
        mode: Optional[str] = None,
        workers: int = 1,
        progress: bool = False,
    ):
        if workers < 1:
            raise ValueError(f"Workers must be at least 1, got {workers}")
        self.backend = backend
        self.mode = mode
        self.workers = workers
        self.progress = progress

    def load_one(self, path: PathLike) -> np.ndarray:
        return load_frame(path, backend=self.backend, mode=self.mode)

    def load(self, paths: Iterable[PathLike]) -> List[np.ndarray]:
        paths = [str(p) for p in paths]
        if not paths:
            return []

        if self.workers <= 1:
            frames = self._load_sequential(paths)
        else:
            frames = self._load_parallel(paths)
            for path, frame in zip(paths[1:], frames[1:]):
                self._check_layout(frames[0], frame, path)

        logger.debug("Loaded %d frames, layout (W, H, C, dtype) = %s", len(frames), frame_layout(frames[0]))
        return frames

    @staticmethod
    def _check_layout(reference: np.ndarray, frame: np.ndarray, path: str) -> None:
        expected, actual = frame_layout(reference), frame_layout(frame)
        if actual != expected:
            raise DimensionMismatchError(expected, actual, path)

    def _load_sequential(self, paths: List[str]) -> List[np.ndarray]:
        frames = []
        iterator = tqdm(paths, desc="Loading frames", unit="frame") if self.progress else paths
        for path in iterator:
            frame = self.load_one(path)
            if frames:
                self._check_layout(frames[0], frame, path)
            frames.append(frame)
        return frames

    def _load_parallel(self, paths: List[str]) -> List[np.ndarray]:
        frames: List[Optional[np.ndarray]] = [None] * len(paths)
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = {executor.submit(self.load_one, path): i for i, path in enumerate(paths)}
            completed = as_completed(futures)
            iterator = tqdm(completed, total=len(futures), desc="Loading frames", unit="frame") if self.progress else completed
            try:
                for future in iterator:
                    frames[futures[future]] = future.result()
            except Exception:
                for future in futures:
                    future.cancel()
                raise
        return frames


class ImageWriter:
    """Encode a canvas; the format follows the output extension."""

    def __init__(self, backend: str = "pil"):
        if backend not in ("pil", "cv2"):
            raise ValueError(f"Unknown backend: {backend}")
        self.backend = backend

    def write(self, canvas: np.ndarray, path: PathLike) -> Path:
        path = Path(path)
        if not path.suffix:
            raise EncodeError(path, "output path has no extension to infer the format from")

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise EncodeError(path, str(e)) from e

        img = canvas[:, :, 0] if canvas.ndim == 3 and canvas.shape[2] == 1 else canvas
        img = np.ascontiguousarray(img)
        if self.backend == "pil":
            self._write_pil(img, path)
        else:
            self._write_cv2(img, path)
        logger.debug("Wrote %s (%s, %s)", path, "x".join(map(str, canvas.shape)), canvas.dtype)
        return path

    @staticmethod
    def _write_pil(img: np.ndarray, path: Path) -> None:
        if path.suffix.lower() not in Image.registered_extensions():
            raise EncodeError(path, f"unsupported output format '{path.suffix}'")
        try:
            Image.fromarray(img).save(path)
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise EncodeError(path, str(e)) from e

    @staticmethod
    def _write_cv2(img: np.ndarray, path: Path) -> None:
        if not cv2.haveImageWriter(str(path)):
            raise EncodeError(path, f"unsupported output format '{path.suffix}'")
        if img.ndim == 3 and img.shape[2] == 3:
            img = cv2.cvtColor(img, cv2.COLOR_RGB2BGR)
        elif img.ndim == 3 and img.shape[2] == 4:
            img = cv2.cvtColor(img, cv2.COLOR_RGBA2BGRA)
        try:
            ok = cv2.imwrite(str(path), img)
        except cv2.error as e:
            raise EncodeError(path, str(e)) from e
        if not ok:
            raise EncodeError(path, "OpenCV could not write the image")
