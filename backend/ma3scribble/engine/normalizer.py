"""Document space → output space.

The output space is the unit square. The document is scaled by its larger
dimension, centered along the shorter one and flipped vertically by adding
the normalized height to every Y.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from ma3scribble.engine.context import Segment
from ma3scribble.engine.transform import AffineHint

# Even indices are X, odd are Y
_X = np.array([True, False] * 4)


@dataclass(frozen=True)
class NormalizationContext:
    scale_factor: float
    normalized_width: float
    normalized_height: float
    offset_x: float
    offset_y: float

    @classmethod
    def from_dimensions(cls, width: float, height: float) -> NormalizationContext:
        larger_dimension = max(width, height)
        scale_factor = 1.0 / larger_dimension
        normalized_width = width * scale_factor
        normalized_height = height * scale_factor

        # Center along the shorter normalized axis
        if width > height:
            offset_x = 0.0
            offset_y = (1 - normalized_height) / 2.0
        else:
            offset_x = (1 - normalized_width) / 2.0
            offset_y = 0.0

        return cls(
            scale_factor=scale_factor,
            normalized_width=normalized_width,
            normalized_height=normalized_height,
            offset_x=offset_x,
            offset_y=offset_y,
        )

    def normalize(self, points: Sequence[float], hint: AffineHint) -> Segment:
        """Map 8 document-space floats to one output-space Segment."""
        pts: NDArray[np.float64] = np.asarray(points, dtype=np.float64)
        if pts.shape != (8,):
            raise ValueError(f"expected 8 coordinates, got shape {pts.shape}")

        # Operation order matters for bit-exact output
        group_scale = np.where(_X, hint.scale_x, hint.scale_y)
        offset = np.where(_X, self.offset_x, self.offset_y)
        out = pts * group_scale
        out = out * self.scale_factor + offset
        out = np.where(_X, out, out + self.normalized_height)

        return Segment(tuple(float(v) for v in out))
