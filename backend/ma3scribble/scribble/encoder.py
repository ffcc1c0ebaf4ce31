"""grandMA3 scribble document — records, thickness mapping and XML output.

Output shape (single line, no declaration):

    <GMA3 DataVersion="2.2.1.1">
      <Scribble Name="...">
        <Scribble Size="N">
          <I>RRGGBB,thickness,x0,y0,x1,y1,x2,y2,x3,y3</I>
          ...
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Iterable

from ma3scribble.engine.config import MAX_STROKE_THICKNESS, ScribbleConfig
from ma3scribble.engine.context import Segment
from ma3scribble.errors import OutputEncodeError
from ma3scribble.utils.color import RGBA, rgba_to_hex

logger = logging.getLogger(__name__)

DATA_VERSION = "2.2.1.1"

# Line thickness range of the scribble format
MIN_THICKNESS = 0.02
MAX_THICKNESS = 0.12

_FLOAT_FORMAT = "%.6f"

# Anything outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _xml_text(value: str) -> str:
    """Replace characters XML cannot carry with U+FFFD."""
    return _INVALID_XML_CHARS.sub("\ufffd", value)


def stroke_thickness_to_scribble(thickness: float) -> float:
    """Map 0.0–10.0 input thickness onto the scribble range."""
    return thickness / MAX_STROKE_THICKNESS * (MAX_THICKNESS - MIN_THICKNESS) + MIN_THICKNESS


def color_to_scribble(color: RGBA) -> str:
    """Six upper-case hex digits, alpha dropped."""
    return rgba_to_hex(color)[1:7]


@dataclass(frozen=True)
class ScribbleRecord:
    color_hex: str
    thickness: float
    points: tuple[float, ...]

    def to_text(self) -> str:
        values = [self.color_hex, _FLOAT_FORMAT % self.thickness]
        values.extend(_FLOAT_FORMAT % p for p in self.points)
        return ",".join(values)


@dataclass(frozen=True)
class ScribbleDocument:
    name: str
    records: tuple[ScribbleRecord, ...] = ()

    @classmethod
    def build(cls, config: ScribbleConfig, segments: Iterable[Segment]) -> ScribbleDocument:
        color_hex = color_to_scribble(config.stroke_color)
        thickness = stroke_thickness_to_scribble(config.stroke_thickness)
        records = tuple(
            ScribbleRecord(color_hex=color_hex, thickness=thickness, points=seg.points)
            for seg in segments
        )
        return cls(name=config.name, records=records)

    def to_element(self) -> ET.Element:
        root = ET.Element("GMA3", {"DataVersion": DATA_VERSION})
        scribble = ET.SubElement(root, "Scribble", {"Name": _xml_text(self.name)})
        content = ET.SubElement(scribble, "Scribble", {"Size": str(len(self.records))})
        for record in self.records:
            ET.SubElement(content, "I").text = record.to_text()
        return root

    def to_xml(self) -> bytes:
        try:
            out = ET.tostring(self.to_element(), encoding="unicode", short_empty_elements=False)
        except (TypeError, ValueError) as e:
            raise OutputEncodeError("encode scribble", {"name": self.name}) from e
        logger.debug("Encoded scribble %r with %d records", self.name, len(self.records))
        return out.encode("utf-8")


def encode_scribble(config: ScribbleConfig, segments: Iterable[Segment]) -> bytes:
    """Build and serialize a scribble document for the given segments."""
    return ScribbleDocument.build(config, segments).to_xml()
