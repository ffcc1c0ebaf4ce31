"""SVG decoder — raw potrace output → VectorDocument.

Reads the root ``width``/``height`` (``pt`` suffix), the direct ``<g>``
children of the root and the direct ``<path>`` children of each group.
Elements are matched by local name so the SVG namespace is optional.
"""

from __future__ import annotations

import logging
import math
import xml.etree.ElementTree as ET

from ma3scribble.engine.context import RawPath, VectorDocument, VectorGroup
from ma3scribble.errors import InputDecodeError

logger = logging.getLogger(__name__)

_UNIT_SUFFIX = "pt"


def _strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _parse_dimension(root: ET.Element, attr: str) -> float:
    raw = root.get(attr)
    if raw is None:
        raise InputDecodeError(f"missing svg {attr}", {"attribute": attr})
    try:
        value = float(raw.strip().removesuffix(_UNIT_SUFFIX))
    except ValueError as e:
        raise InputDecodeError(f"parse svg {attr}", {"attribute": attr, "was": raw}) from e
    if not math.isfinite(value) or value <= 0:
        raise InputDecodeError(f"svg {attr} must be positive", {"attribute": attr, "was": raw})
    return value


def decode_svg(svg_raw: bytes | str) -> VectorDocument:
    """Decode an SVG document into its dimensions and groups of paths."""
    try:
        root = ET.fromstring(svg_raw)
    except ET.ParseError as e:
        raise InputDecodeError("parse svg", {"error": str(e)}) from e

    if _strip_ns(root.tag) != "svg":
        raise InputDecodeError("expected <svg> root element", {"was": _strip_ns(root.tag)})

    width = _parse_dimension(root, "width")
    height = _parse_dimension(root, "height")

    groups: list[VectorGroup] = []
    for g in root:
        if _strip_ns(g.tag) != "g":
            continue
        paths = tuple(
            RawPath(d=p.get("d", "")) for p in g if _strip_ns(p.tag) == "path"
        )
        groups.append(VectorGroup(transform=g.get("transform", ""), paths=paths))

    doc = VectorDocument(width=width, height=height, groups=tuple(groups))
    logger.debug(
        "Decoded SVG: %.1f×%.1f, %d groups, %d paths",
        width,
        height,
        len(doc.groups),
        doc.path_count,
    )
    return doc
