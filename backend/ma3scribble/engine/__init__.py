"""Path reinterpretation and scribble encoding engine."""

from ma3scribble.engine.builder import CubicBuilder, LineBuilder, SegmentKind, new_builder
from ma3scribble.engine.config import ScribbleConfig
from ma3scribble.engine.context import RawPath, Segment, VectorDocument, VectorGroup
from ma3scribble.engine.normalizer import NormalizationContext
from ma3scribble.engine.tokenizer import tokenize
from ma3scribble.engine.transform import AffineHint, resolve_transform

__all__ = [
    "AffineHint",
    "CubicBuilder",
    "LineBuilder",
    "NormalizationContext",
    "RawPath",
    "ScribbleConfig",
    "Segment",
    "SegmentKind",
    "VectorDocument",
    "VectorGroup",
    "new_builder",
    "resolve_transform",
    "tokenize",
]
