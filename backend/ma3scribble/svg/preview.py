"""Preview rewrite — render potrace fills as strokes in the scribble color."""

from __future__ import annotations

from ma3scribble.utils.color import RGBA, rgba_to_hex

# Fill styles potrace writes on its path group
_POTRACE_FILLS = (
    'fill="#000000" stroke="none"',
    'fill="#ffffff" stroke="none"',
)

PREVIEW_STROKE_WIDTH = 50


def stroke_preview(svg_text: str, stroke_color: RGBA) -> str:
    """Swap potrace's filled style for a transparent fill and a colored stroke."""
    replacement = (
        f'fill="transparent" stroke="{rgba_to_hex(stroke_color)}" '
        f'stroke-width="{PREVIEW_STROKE_WIDTH}"'
    )
    for fill in _POTRACE_FILLS:
        svg_text = svg_text.replace(fill, replacement)
    return svg_text
