"""Scribble configuration — caller-supplied inputs of one conversion."""

from __future__ import annotations

from dataclasses import dataclass

from ma3scribble.utils.color import RGBA, WHITE

DEFAULT_NAME = "MyScribble"
DEFAULT_STROKE_THICKNESS = 0.2

# Stroke thickness input range
MIN_STROKE_THICKNESS = 0.0
MAX_STROKE_THICKNESS = 10.0


@dataclass(frozen=True)
class ScribbleConfig:
    """Name, stroke thickness (0.0 to 10.0) and stroke color of the output."""

    name: str = DEFAULT_NAME
    stroke_thickness: float = DEFAULT_STROKE_THICKNESS
    stroke_color: RGBA = WHITE
