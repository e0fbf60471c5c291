"""Tests for ShutterGenerator."""

import pytest
import numpy as np
from PIL import Image

from rollshutter.codecs import ScanlineMapCodec, load_frame
from rollshutter.core import (
    ConfigError,
    DecodeError,
    DimensionMismatchError,
    MalformedTemplateError,
    NoFramesFoundError,
    ShutterConfig,
)
from rollshutter.generators import ShutterGenerator


def _write_frames(root, count, size=(100, 10), gap_after=None):
    """Write frames f00.png.. filled with 40 * index; optional extra frame after a gap."""
    W, H = size
    for i in range(count):
        Image.fromarray(np.full((H, W, 3), 40 * i, dtype=np.uint8)).save(root / f"f{i:02d}.png")
    if gap_after is not None:
        Image.fromarray(np.full((H, W, 3), 255, dtype=np.uint8)).save(root / f"f{gap_after:02d}.png")


class TestShutterGenerator:
    @pytest.fixture
    def frames_dir(self, tmp_path):
        root = tmp_path / "frames"
        root.mkdir()
        _write_frames(root, 5, gap_after=6)
        return root

    def _config(self, frames_dir, tmp_path, **kwargs):
        return ShutterConfig(
            template=str(frames_dir / "f%02d.png"),
            output=str(tmp_path / "out" / "shutter.png"),
            progress=False,
            **kwargs,
        )

    def test_top_to_bottom_scenario(self, frames_dir, tmp_path):
        result = ShutterGenerator(self._config(frames_dir, tmp_path)).generate()

        assert result["frames"] == 5
        assert result["shape"] == (10, 100, 3)
        assert result["direction"] == "top-to-bottom"
        assert result["map"] is None

        canvas = load_frame(result["output"])
        assert canvas.shape == (10, 100, 3)
        assert (canvas[:, 0, 0] // 40).tolist() == [0, 0, 1, 1, 2, 2, 3, 3, 4, 4]

    def test_frames_after_gap_ignored(self, frames_dir, tmp_path):
        result = ShutterGenerator(self._config(frames_dir, tmp_path)).generate()
        canvas = load_frame(result["output"])
        assert (canvas != 255).all()

    def test_right_to_left_parallel(self, frames_dir, tmp_path):
        cfg = self._config(frames_dir, tmp_path, direction="E", workers=3)
        result = ShutterGenerator(cfg).generate()

        canvas = load_frame(result["output"])
        cols = canvas[0, :, 0] // 40
        assert cols[0] == 4
        assert cols[-1] == 0
        assert all(a >= b for a, b in zip(cols, cols[1:]))

    def test_start_index(self, frames_dir, tmp_path):
        result = ShutterGenerator(self._config(frames_dir, tmp_path, start=3)).generate()
        assert result["frames"] == 2
        canvas = load_frame(result["output"])
        assert (canvas[:, 0, 0] // 40).tolist() == [3] * 5 + [4] * 5

    def test_scanline_map(self, frames_dir, tmp_path):
        map_path = tmp_path / "out" / "shutter.npy"
        cfg = self._config(frames_dir, tmp_path, direction="S", map_path=str(map_path))
        result = ShutterGenerator(cfg).generate()

        assert result["map"] == map_path
        loaded = ScanlineMapCodec.load(map_path)
        assert loaded["indices"].tolist() == [4, 4, 3, 3, 2, 2, 1, 1, 0, 0]
        assert loaded["direction"] == "bottom-to-top"
        assert loaded["shape"] == (10, 100, 3)
        assert loaded["meta"]["last_index"] == 4
        assert ScanlineMapCodec.source_paths(loaded)[0].endswith("f04.png")

    def test_no_frames(self, tmp_path):
        cfg = ShutterConfig(template=str(tmp_path / "f%02d.png"), output=str(tmp_path / "o.png"), progress=False)
        with pytest.raises(NoFramesFoundError):
            ShutterGenerator(cfg).generate()
        assert not (tmp_path / "o.png").exists()

    def test_malformed_template(self, tmp_path):
        cfg = ShutterConfig(template=str(tmp_path / "frames.png"), output=str(tmp_path / "o.png"))
        with pytest.raises(MalformedTemplateError):
            ShutterGenerator(cfg).generate()

    def test_dimension_mismatch(self, frames_dir, tmp_path):
        Image.fromarray(np.zeros((10, 90, 3), np.uint8)).save(frames_dir / "f05.png")
        with pytest.raises(DimensionMismatchError):
            ShutterGenerator(self._config(frames_dir, tmp_path)).generate()
        assert not (tmp_path / "out" / "shutter.png").exists()

    def test_decode_error(self, frames_dir, tmp_path):
        (frames_dir / "f02.png").write_bytes(b"broken")
        with pytest.raises(DecodeError):
            ShutterGenerator(self._config(frames_dir, tmp_path)).generate()

    def test_invalid_config(self, frames_dir, tmp_path):
        with pytest.raises(ConfigError):
            ShutterGenerator(self._config(frames_dir, tmp_path, workers=0))
