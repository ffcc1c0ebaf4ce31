"""Path tokenizer for the restricted path language emitted by potrace.

Supported input: one absolute ``M x y`` followed by runs of relative ``l`` and
``c`` commands with integer coordinates, optionally closed with ``z``.
"""

from __future__ import annotations

import re
from typing import Union

from ma3scribble.engine.builder import SegmentKind
from ma3scribble.errors import MalformedPathData

Token = Union[SegmentKind, int]

_MARKERS: dict[str, SegmentKind] = {
    "l": SegmentKind.LINE,
    "c": SegmentKind.CUBIC,
}

# Optional sign followed by digits only
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _normalize(d: str) -> str:
    d = d.strip()
    d = d.replace("\n", " ")
    d = d.replace("\r", "")
    d = d.replace("\t", "")
    d = d.replace("M", "")
    d = d.replace("z", "")
    for marker in _MARKERS:
        d = d.replace(marker, f" {marker} ")
    return d


def tokenize(d: str) -> list[Token]:
    """Split path data into command markers and integer literals.

    Raises MalformedPathData on any other token.
    """
    tokens: list[Token] = []
    for part in _normalize(d).split(" "):
        if not part:
            continue
        kind = _MARKERS.get(part)
        if kind is not None:
            tokens.append(kind)
            continue
        if not _INT_RE.fullmatch(part):
            raise MalformedPathData("parse number segment", {"was": part, "path": d})
        try:
            value = int(part)
            # Builders work in floats, so the literal must fit one
            float(value)
        except (ValueError, OverflowError) as e:
            raise MalformedPathData("parse number segment", {"was": part, "path": d}) from e
        tokens.append(value)
    return tokens
