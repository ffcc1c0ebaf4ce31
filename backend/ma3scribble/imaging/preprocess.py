"""PNG preprocessing before tracing — transparency recolor and Gaussian blur."""

from __future__ import annotations

import io
import logging
import time
from dataclasses import dataclass

import numpy as np
from PIL import Image, ImageFilter, UnidentifiedImageError

from ma3scribble.errors import ImageDecodeError
from ma3scribble.utils.color import RGBA, WHITE

logger = logging.getLogger(__name__)

_OPAQUE = 255


@dataclass(frozen=True)
class PreprocessConfig:
    transparency_replacement_color: RGBA = WHITE
    blur_radius: float = 0.0


def decode_image(data: bytes) -> Image.Image:
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError) as e:
        raise ImageDecodeError("parse png", {"bytes": len(data)}) from e
    return image


def recolor_transparency(image: Image.Image, replacement: RGBA) -> Image.Image:
    """Replace every pixel that is not fully opaque; the result is opaque RGBA."""
    pixels = np.array(image.convert("RGBA"))
    translucent = pixels[:, :, 3] < _OPAQUE
    pixels[translucent] = (replacement.r, replacement.g, replacement.b, _OPAQUE)
    pixels[:, :, 3] = _OPAQUE
    return Image.fromarray(pixels)


def preprocess_png(data: bytes, config: PreprocessConfig) -> bytes:
    """Decode, recolor, optionally blur and re-encode a PNG."""
    start = time.perf_counter()
    logger.debug("Start preprocessing")

    image = recolor_transparency(decode_image(data), config.transparency_replacement_color)
    if config.blur_radius > 0:
        image = image.filter(ImageFilter.GaussianBlur(radius=config.blur_radius))

    out = io.BytesIO()
    image.save(out, format="PNG")
    logger.debug("Finished preprocessing in %.1fms", (time.perf_counter() - start) * 1000)
    return out.getvalue()
