"""Tests for frame discovery."""

import types

import pytest

from rollshutter.core import FrameTemplate, NoFramesFoundError, locate, locate_frames


def _oracle(*names):
    existing = set(names)
    return lambda path: path in existing


class TestLocate:
    def test_gap_stop(self):
        exists = _oracle("f00.png", "f01.png", "f02.png", "f04.png", "f05.png")
        result = list(locate("f%02d.png", exists=exists))
        assert result == [(0, "f00.png"), (1, "f01.png"), (2, "f02.png")]

    def test_empty_start(self):
        exists = _oracle("f01.png", "f02.png")
        assert list(locate("f%02d.png", exists=exists)) == []

    def test_custom_start(self):
        exists = _oracle("f00.png", "f01.png", "f02.png", "f04.png", "f05.png")
        assert [i for i, _ in locate("f%02d.png", start=4, exists=exists)] == [4, 5]

    def test_accepts_parsed_template(self):
        tpl = FrameTemplate.parse("seq/%03d.jpg")
        exists = _oracle("seq/000.jpg", "seq/001.jpg")
        assert [p for _, p in locate(tpl, exists=exists)] == ["seq/000.jpg", "seq/001.jpg"]

    def test_capacity_overflow_stops(self):
        names = [f"f{i}.png" for i in range(12)]
        result = list(locate("f%01d.png", exists=_oracle(*names)))
        assert [i for i, _ in result] == list(range(10))

    def test_is_lazy(self):
        calls = []

        def exists(path):
            calls.append(path)
            return True

        it = locate("f%03d.png", exists=exists)
        assert isinstance(it, types.GeneratorType)
        assert calls == []
        assert next(it) == (0, "f000.png")
        assert calls == ["f000.png"]

    def test_stops_probing_after_gap(self):
        calls = []

        def exists(path):
            calls.append(path)
            return path in {"f00.png", "f02.png"}

        list(locate("f%02d.png", exists=exists))
        assert calls == ["f00.png", "f01.png"]

    def test_filesystem(self, tmp_path):
        for i in (0, 1, 2, 4):
            (tmp_path / f"{i:03d}.png").write_bytes(b"")
        result = list(locate(str(tmp_path / "%03d.png")))
        assert [i for i, _ in result] == [0, 1, 2]


class TestLocateFrames:
    def test_returns_list(self):
        exists = _oracle("f00.png", "f01.png")
        assert locate_frames("f%02d.png", exists=exists) == [(0, "f00.png"), (1, "f01.png")]

    def test_empty_raises(self):
        with pytest.raises(NoFramesFoundError) as exc:
            locate_frames("f%02d.png", start=3, exists=_oracle("f00.png"))
        assert exc.value.start == 3
        assert exc.value.mask == "f%02d.png"
