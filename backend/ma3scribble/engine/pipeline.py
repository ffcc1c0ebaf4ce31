"""Conversion pipeline — SVG bytes in, scribble XML out.

decode → per group: resolve transform → per path: tokenize → build segments
→ normalize → encode. Stateless; every call allocates its own objects.
"""

from __future__ import annotations

import logging
import time

from ma3scribble.engine.builder import SegmentKind, new_builder
from ma3scribble.engine.config import ScribbleConfig
from ma3scribble.engine.context import RawPath, Segment, VectorDocument
from ma3scribble.engine.normalizer import NormalizationContext
from ma3scribble.engine.tokenizer import tokenize
from ma3scribble.engine.transform import AffineHint, resolve_transform
from ma3scribble.errors import BuilderStateViolation
from ma3scribble.scribble.encoder import encode_scribble
from ma3scribble.svg.parser import decode_svg

logger = logging.getLogger(__name__)


def path_segments(path: RawPath, norm: NormalizationContext, hint: AffineHint) -> list[Segment]:
    """Walk one path's tokens through the segment builders."""
    segments: list[Segment] = []
    current_x = current_y = 0.0
    move_values = 0
    builder = None

    for token in tokenize(path.d):
        if isinstance(token, SegmentKind):
            builder = new_builder(token, current_x, current_y)
            continue

        value = float(token)
        # The first two numbers are the absolute move-to
        if move_values == 0:
            current_x = value
            move_values += 1
            continue
        if move_values == 1:
            current_y = value
            move_values += 1
            continue

        if builder is None:
            raise BuilderStateViolation("no builder", {"was": token, "path": path.d})
        if builder.feed(value):
            segments.append(norm.normalize(builder.control_points(), hint))
            current_x, current_y = builder.current_endpoint()
            builder = builder.next()

    return segments


def document_segments(doc: VectorDocument) -> list[Segment]:
    """All segments of the document in group, path and emission order."""
    norm = NormalizationContext.from_dimensions(doc.width, doc.height)
    segments: list[Segment] = []
    for group in doc.groups:
        hint = resolve_transform(group.transform)
        logger.debug("Building from paths: %d", len(group.paths))
        for path in group.paths:
            segments.extend(path_segments(path, norm, hint))
    return segments


def encode_svg_to_scribble(svg_raw: bytes | str, config: ScribbleConfig) -> bytes:
    """Convert a potrace SVG into a grandMA3 scribble XML document."""
    start = time.perf_counter()
    doc = decode_svg(svg_raw)
    segments = document_segments(doc)
    out = encode_scribble(config, segments)
    logger.info(
        "Encoded %d paths into %d scribble records in %.1fms",
        doc.path_count,
        len(segments),
        (time.perf_counter() - start) * 1000,
    )
    return out
