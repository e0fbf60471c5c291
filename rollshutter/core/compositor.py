"""Slice compositor: build the rolling shutter canvas from a frame stack."""

import logging
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np
import torch

from .direction import Direction
from .errors import DimensionMismatchError, EmptySequenceError

logger = logging.getLogger(__name__)

Frame = Union[np.ndarray, torch.Tensor]

# numpy dtypes torch cannot index directly; widened losslessly and restored after
_WIDEN = {
    np.dtype(np.uint16): np.int32,
    np.dtype(np.uint32): np.int64,
}


def frame_indices(num_frames: int, num_scanlines: int, reverse: bool = False) -> torch.Tensor:
    """Source frame index for every scanline.

    For ``N <= S`` scanline ``s`` reads frame ``floor(s * N / S)``, so each frame
    covers a run of consecutive scanlines. For ``N > S`` the mapping is aligned on
    both ends, ``floor(s * (N - 1) / (S - 1))``, and intermediate frames are
    skipped. Either way the result is non-decreasing, starts at 0 and ends at
    ``N - 1``. Reverse sweeps read ``frame_indices(S - 1 - s)``.

    Do not collapse the N > S branch into ``floor(s * N / S)``: for N > S that
    formula stops short of the last frame at ``s = S - 1``.

    Args:
        num_frames: N, number of frames in the sequence
        num_scanlines: S, rows or columns along the scan axis
        reverse: walk scanlines from the far edge

    Returns:
        idx: [S] int64 tensor
    """
    if num_frames < 1:
        raise EmptySequenceError()
    if num_scanlines < 1:
        raise ValueError(f"Canvas must have at least one scanline, got {num_scanlines}")

    s = torch.arange(num_scanlines, dtype=torch.long)
    if num_frames <= num_scanlines:
        idx = torch.div(s * num_frames, num_scanlines, rounding_mode="floor")
    elif num_scanlines == 1:
        idx = torch.full((1,), num_frames - 1, dtype=torch.long)
    else:
        idx = torch.div(s * (num_frames - 1), num_scanlines - 1, rounding_mode="floor")

    return idx.flip(0) if reverse else idx


def _layout(frame: Frame) -> Tuple:
    dtype = frame.dtype if isinstance(frame, torch.Tensor) else np.dtype(frame.dtype)
    return tuple(frame.shape), str(dtype)


def _check_uniform(frames: Sequence[Frame]) -> None:
    expected = _layout(frames[0])
    if len(expected[0]) < 2:
        raise DimensionMismatchError(("H", "W", "..."), expected, "frame 0")
    for i, frame in enumerate(frames[1:], start=1):
        actual = _layout(frame)
        if actual != expected:
            raise DimensionMismatchError(expected, actual, f"frame {i}")


def _stack(frames: List[Frame]) -> Tuple[torch.Tensor, object]:
    """Stack frames into a [N, H, W, ...] tensor; return it with the dtype to restore."""
    if isinstance(frames[0], torch.Tensor):
        return torch.stack(frames, dim=0), None

    stack = np.stack(frames, axis=0)
    if not stack.dtype.isnative:
        stack = stack.astype(stack.dtype.newbyteorder("="))
    restore = None
    if stack.dtype in _WIDEN:
        restore = stack.dtype
        stack = stack.astype(_WIDEN[stack.dtype])
    return torch.from_numpy(stack), restore


def composite(frames: Iterable[Frame], direction: Union[Direction, str] = Direction.TOP_TO_BOTTOM) -> Frame:
    """Composite a rolling shutter canvas.

    Every scanline of the canvas is copied verbatim from the same scanline of
    exactly one source frame, chosen by :func:`frame_indices`.

    Args:
        frames: non-empty ordered frames, each [H, W] or [H, W, C], all identical
            in shape and dtype (numpy arrays or torch tensors, not mixed)
        direction: Direction or anything Direction.parse accepts

    Returns:
        canvas: same type, shape and dtype as a single input frame
    """
    direction = Direction.parse(direction)
    frames = list(frames)
    if not frames:
        raise EmptySequenceError()
    _check_uniform(frames)

    as_numpy = not isinstance(frames[0], torch.Tensor)
    stack, restore = _stack(frames)
    N, H, W = stack.shape[:3]

    S = direction.scanlines(H, W)
    idx = frame_indices(N, S, reverse=direction.reverse).to(stack.device)
    lines = torch.arange(S, device=stack.device)

    if direction.axis == "rows":
        canvas = stack[idx, lines]
    else:
        # advanced indices split by a slice land first: [W, H, ...]
        canvas = stack[idx, :, lines].transpose(0, 1)
    canvas = canvas.contiguous()

    logger.debug("Composited %d frames onto %d %s (%s)", N, S, direction.axis, direction.value)

    if not as_numpy:
        return canvas
    out = canvas.numpy()
    return out.astype(restore) if restore is not None else out
