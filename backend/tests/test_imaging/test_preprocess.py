"""Tests for PNG preprocessing."""

from __future__ import annotations

import io

import pytest
from PIL import Image

from ma3scribble.errors import ImageDecodeError
from ma3scribble.imaging.preprocess import PreprocessConfig, preprocess_png, recolor_transparency
from ma3scribble.utils.color import RGBA
from tests.conftest import make_png

RED = RGBA(255, 0, 0)


def _decode(data: bytes) -> Image.Image:
    return Image.open(io.BytesIO(data))


class TestRecolorTransparency:
    def test_transparent_pixel_replaced(self, png_bytes):
        out = recolor_transparency(_decode(png_bytes), RED)
        assert out.getpixel((0, 0)) == (255, 0, 0, 255)
        assert out.getpixel((3, 3)) == (0, 0, 0, 255)

    def test_partial_alpha_replaced(self):
        image = Image.new("RGBA", (2, 1), (10, 20, 30, 254))
        image.putpixel((1, 0), (10, 20, 30, 255))
        out = recolor_transparency(image, RED)
        assert out.getpixel((0, 0)) == (255, 0, 0, 255)
        assert out.getpixel((1, 0)) == (10, 20, 30, 255)

    def test_rgb_input_becomes_rgba(self):
        out = recolor_transparency(Image.new("RGB", (3, 3), (1, 2, 3)), RED)
        assert out.mode == "RGBA"
        assert out.getpixel((2, 2)) == (1, 2, 3, 255)


class TestPreprocessPng:
    def test_default_replacement_is_white(self, png_bytes):
        image = _decode(preprocess_png(png_bytes, PreprocessConfig()))
        assert image.format == "PNG"
        assert image.size == (8, 8)
        assert image.getpixel((0, 0)) == (255, 255, 255, 255)

    def test_every_pixel_opaque(self):
        data = make_png(size=(4, 4), transparent_pixel=(2, 1))
        image = _decode(preprocess_png(data, PreprocessConfig(transparency_replacement_color=RED)))
        assert {px[3] for px in image.getdata()} == {255}

    def test_blur_spreads_replacement(self, png_bytes):
        config = PreprocessConfig(transparency_replacement_color=RED, blur_radius=2)
        image = _decode(preprocess_png(png_bytes, config))
        assert image.getpixel((0, 0))[0] < 255
        assert image.getpixel((1, 1))[0] > 0

    def test_zero_blur_keeps_pixels(self, png_bytes):
        image = _decode(preprocess_png(png_bytes, PreprocessConfig(transparency_replacement_color=RED)))
        assert image.getpixel((1, 1)) == (0, 0, 0, 255)

    @pytest.mark.parametrize("data", [b"", b"not a png"])
    def test_bad_image(self, data):
        with pytest.raises(ImageDecodeError):
            preprocess_png(data, PreprocessConfig())
