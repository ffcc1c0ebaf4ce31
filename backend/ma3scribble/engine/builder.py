"""Segment builders — one instance per command run.

A builder is rooted at the current point, is fed relative values one at a
time and reports completion once it has enough of them. Both kinds produce a
cubic Bézier as 8 floats; a line becomes a degenerate cubic with both control
points on the midpoint.

Usage:
    builder = new_builder(SegmentKind.CUBIC, x, y)
    for value in values:
        if builder.feed(value):
            points = builder.control_points()
            builder = builder.next()
"""

from __future__ import annotations

import abc
import enum

from ma3scribble.errors import BuilderStateViolation


class SegmentKind(enum.Enum):
    LINE = "l"
    CUBIC = "c"


class _Builder(abc.ABC):
    kind: SegmentKind
    # Number of relative values this kind consumes
    arity: int

    def __init__(self, start_x: float, start_y: float) -> None:
        self.start_x = start_x
        self.start_y = start_y
        self.end_x = start_x
        self.end_y = start_y
        self._n = 0

    @property
    def complete(self) -> bool:
        return self._n >= self.arity

    def feed(self, value: float) -> bool:
        """Consume one relative value. Returns True once the segment is complete."""
        if self.complete:
            raise BuilderStateViolation(
                "feed on completed builder", {"kind": self.kind.value, "was": value}
            )
        self._accept(self._n, value)
        self._n += 1
        return self.complete

    @abc.abstractmethod
    def _accept(self, index: int, value: float) -> None:
        ...

    @abc.abstractmethod
    def control_points(self) -> tuple[float, float, float, float, float, float, float, float]:
        ...

    def current_endpoint(self) -> tuple[float, float]:
        return (self.end_x, self.end_y)

    def next(self) -> _Builder:
        """Fresh builder of the same kind rooted at this segment's end."""
        return type(self)(self.end_x, self.end_y)


class LineBuilder(_Builder):
    """Expects Δx, Δy. X is added, Y is subtracted."""

    kind = SegmentKind.LINE
    arity = 2

    def _accept(self, index: int, value: float) -> None:
        if index == 0:
            self.end_x = self.start_x + value
        else:
            self.end_y = self.start_y - value

    def control_points(self) -> tuple[float, float, float, float, float, float, float, float]:
        mid_x = (self.start_x + self.end_x) / 2
        mid_y = (self.start_y + self.end_y) / 2
        return (self.start_x, self.start_y, mid_x, mid_y, mid_x, mid_y, self.end_x, self.end_y)


class CubicBuilder(_Builder):
    """Expects Δcx1, Δcy1, Δcx2, Δcy2, Δex, Δey, all added to the origin."""

    kind = SegmentKind.CUBIC
    arity = 6

    def __init__(self, start_x: float, start_y: float) -> None:
        super().__init__(start_x, start_y)
        self.control_x1 = self.control_y1 = 0.0
        self.control_x2 = self.control_y2 = 0.0

    def _accept(self, index: int, value: float) -> None:
        if index % 2 == 0:
            x = self.start_x + value
            if index == 0:
                self.control_x1 = x
            elif index == 2:
                self.control_x2 = x
            else:
                self.end_x = x
        else:
            y = self.start_y + value
            if index == 1:
                self.control_y1 = y
            elif index == 3:
                self.control_y2 = y
            else:
                self.end_y = y

    def control_points(self) -> tuple[float, float, float, float, float, float, float, float]:
        return (
            self.start_x,
            self.start_y,
            self.control_x1,
            self.control_y1,
            self.control_x2,
            self.control_y2,
            self.end_x,
            self.end_y,
        )


_BUILDERS: dict[SegmentKind, type[_Builder]] = {
    SegmentKind.LINE: LineBuilder,
    SegmentKind.CUBIC: CubicBuilder,
}


def new_builder(kind: SegmentKind, start_x: float, start_y: float) -> _Builder:
    return _BUILDERS[kind](start_x, start_y)
