"""Tests for FrameTemplate."""

import pytest

from rollshutter.core import FrameTemplate, MalformedTemplateError


class TestParse:
    def test_zero_padded(self):
        tpl = FrameTemplate.parse("foo%03d.png")
        assert tpl == FrameTemplate(prefix="foo", digits=3, zero_padded=True, suffix=".png")

    def test_unpadded(self):
        tpl = FrameTemplate.parse("foo%5d.jpg")
        assert tpl == FrameTemplate(prefix="foo", digits=5, zero_padded=False, suffix=".jpg")

    def test_directory_prefix(self):
        tpl = FrameTemplate.parse("frames/shot_%04d.tif")
        assert tpl.prefix == "frames/shot_"
        assert tpl.suffix == ".tif"
        assert tpl.digits == 4

    def test_no_placeholder(self):
        with pytest.raises(MalformedTemplateError) as exc:
            FrameTemplate.parse("foo.png")
        assert exc.value.mask == "foo.png"

    def test_multiple_placeholders(self):
        with pytest.raises(MalformedTemplateError):
            FrameTemplate.parse("foo%02dbar%4d.png")

    def test_zero_width(self):
        with pytest.raises(MalformedTemplateError):
            FrameTemplate.parse("foo%0d.png")

    def test_bare_d_is_not_a_placeholder(self):
        with pytest.raises(MalformedTemplateError):
            FrameTemplate.parse("foo%d.png")


class TestRender:
    def test_zero_padded(self):
        tpl = FrameTemplate.parse("frames/%03d.png")
        assert tpl.render(0) == "frames/000.png"
        assert tpl.render(7) == "frames/007.png"
        assert tpl.render(999) == "frames/999.png"

    def test_unpadded(self):
        tpl = FrameTemplate.parse("foo%5d.jpg")
        assert tpl.render(7) == "foo7.jpg"
        assert tpl.render(12345) == "foo12345.jpg"

    def test_negative_index(self):
        with pytest.raises(ValueError):
            FrameTemplate.parse("f%02d.png").render(-1)

    def test_pure(self):
        tpl = FrameTemplate.parse("f%02d.png")
        assert tpl.render(3) == tpl.render(3)
        assert tpl.render(4) == "f04.png"

    def test_capacity(self):
        tpl = FrameTemplate.parse("f%02d.png")
        assert tpl.capacity == 100
        assert tpl.fits(99)
        assert not tpl.fits(100)
        assert not tpl.fits(-1)

    def test_str(self):
        for mask in ["f%02d.png", "foo%5d.jpg", "a/b/%010d.tiff"]:
            assert str(FrameTemplate.parse(mask)) == mask
