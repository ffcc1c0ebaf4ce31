"""Data model shared by the conversion stages.

VectorDocument → VectorGroup → RawPath is the decoded input.
Segment is the unit produced by the builders and consumed by the encoder.
All of it is immutable and allocated per conversion.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RawPath:
    """Untouched path data of one drawable shape."""

    d: str


@dataclass(frozen=True)
class VectorGroup:
    # Raw transform attribute, resolved by engine.transform
    transform: str = ""
    paths: tuple[RawPath, ...] = ()


@dataclass(frozen=True)
class VectorDocument:
    """Decoded input document. Both dimensions are positive."""

    width: float
    height: float
    groups: tuple[VectorGroup, ...] = field(default_factory=tuple)

    @property
    def path_count(self) -> int:
        return sum(len(g.paths) for g in self.groups)


@dataclass(frozen=True)
class Segment:
    """Cubic Bézier as 8 floats: start, control 1, control 2, end (x, y pairs)."""

    points: tuple[float, float, float, float, float, float, float, float]

    def __post_init__(self) -> None:
        if len(self.points) != 8:
            raise ValueError(f"Segment needs 8 coordinates, got {len(self.points)}")

    @property
    def start(self) -> tuple[float, float]:
        return (self.points[0], self.points[1])

    @property
    def end(self) -> tuple[float, float]:
        return (self.points[6], self.points[7])
