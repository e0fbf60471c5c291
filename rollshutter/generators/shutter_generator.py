"""Shutter Generator: file mask in, rolling shutter image out."""

import logging
from pathlib import Path
from typing import Dict, Any, Optional

from ..core import ShutterConfig, composite, frame_indices, locate_frames
from ..codecs import FrameLoader, ImageWriter, ScanlineMapCodec

logger = logging.getLogger(__name__)


class ShutterGenerator:
    """Run one rolling shutter synthesis from a ShutterConfig.

    Pipeline: locate frames -> decode -> composite -> encode, plus an optional
    scanline map sidecar. Every error is fatal and propagates unchanged.
    """

    def __init__(self, config: ShutterConfig):
        """Initialize generator.

        Args:
            config: job settings, validated here
        """
        self.config = config.validate()
        self.direction = config.sweep
        self.loader = FrameLoader(
            backend=config.backend,
            mode=config.mode,
            workers=config.workers,
            progress=config.progress,
        )
        self.writer = ImageWriter(backend=config.backend)

    def generate(self) -> Dict[str, Any]:
        """Generate the output image.

        Returns:
            dict with frame count, canvas shape, direction and written paths
        """
        cfg = self.config
        located = locate_frames(cfg.template, start=cfg.start)
        paths = [path for _, path in located]

        frames = self.loader.load(paths)
        canvas = composite(frames, self.direction)
        del frames

        output = self.writer.write(canvas, cfg.output)
        logger.info("Saved %s from %d frames (%s)", output, len(paths), self.direction.value)

        map_path: Optional[Path] = None
        if cfg.map_path:
            map_path = Path(cfg.map_path)
            H, W = canvas.shape[:2]
            indices = frame_indices(len(paths), self.direction.scanlines(H, W), self.direction.reverse)
            ScanlineMapCodec.save(
                map_path,
                indices=indices.numpy(),
                direction=self.direction.value,
                frame_paths=paths,
                shape=canvas.shape,
                meta={
                    "template": cfg.template,
                    "start": cfg.start,
                    "first_index": located[0][0],
                    "last_index": located[-1][0],
                    "output": str(output),
                },
            )
            logger.info("Saved scanline map %s", map_path)

        return {
            "frames": len(paths),
            "shape": tuple(canvas.shape),
            "direction": self.direction.value,
            "output": output,
            "map": map_path,
        }
