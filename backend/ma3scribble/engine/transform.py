"""Group transform resolution.

Potrace wraps its paths in ``<g transform="translate(0,H) scale(0.1,-0.1)">``.
Only ``scale`` is applied to the geometry; ``translate`` is recorded for
debugging. Unknown functions are ignored.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ma3scribble.errors import MalformedTransform

logger = logging.getLogger(__name__)

_CALL_RE = re.compile(r"^([A-Za-z]+)\(([^()]*)\)$")
_PARAM_SPLIT_RE = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class AffineHint:
    translate_x: float = 0.0
    translate_y: float = 0.0
    # Absent scale stays 0, which collapses all geometry of the group.
    scale_x: float = 0.0
    scale_y: float = 0.0


def _split_calls(transform: str) -> list[str]:
    """Split on the spaces between calls, keeping spaces inside parentheses."""
    calls: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in transform.strip():
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        if ch.isspace() and depth == 0:
            if current:
                calls.append("".join(current))
                current = []
            continue
        current.append(ch)
    if current:
        calls.append("".join(current))
    return calls


def _parse_pair(call: str, params: str, transform: str) -> tuple[float, float]:
    parts = [p for p in _PARAM_SPLIT_RE.split(params.strip()) if p]
    if len(parts) != 2:
        raise MalformedTransform(
            "transform call needs exactly two parameters",
            {"action": call, "was": transform},
        )
    try:
        return float(parts[0]), float(parts[1])
    except ValueError as e:
        raise MalformedTransform(
            "parse param from action", {"action": call, "was": transform}
        ) from e


def resolve_transform(transform: str | None) -> AffineHint:
    """Parse a space-separated list of ``name(p1,p2)`` calls."""
    translate_x = translate_y = 0.0
    scale_x = scale_y = 0.0

    for call in _split_calls(transform or ""):
        match = _CALL_RE.match(call)
        if match is None:
            raise MalformedTransform("malformed transform call", {"action": call, "was": transform})
        name, params = match.group(1), match.group(2)
        if name == "translate":
            translate_x, translate_y = _parse_pair(call, params, transform or "")
        elif name == "scale":
            scale_x, scale_y = _parse_pair(call, params, transform or "")
        else:
            logger.debug("Ignoring transform function %s", name)

    hint = AffineHint(translate_x, translate_y, scale_x, scale_y)
    logger.debug("Resolved transform %r → %s", transform, hint)
    return hint
