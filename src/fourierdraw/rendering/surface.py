"""Rendering surfaces that animation frames are drawn onto."""

from dataclasses import dataclass, field
from typing import Protocol, Sequence

from fourierdraw.models import AnimationFrame, Position


class RenderingSurface(Protocol):
    """Drawing primitives the animator needs from a canvas."""

    def clear(self) -> None: ...

    def draw_circle(self, center: Position, radius: float) -> None: ...

    def draw_line(self, start: Position, end: Position) -> None: ...

    def draw_trace(self, points: Sequence[Position]) -> None: ...

    def flush(self) -> None: ...


@dataclass
class RecordingSurface:
    """Surface that records drawing calls instead of drawing.

    Used for headless runs and tests. ``operations`` holds tuples of
    ``(name, *args)`` in call order.
    """

    operations: list[tuple] = field(default_factory=list)

    def clear(self) -> None:
        self.operations.append(("clear",))

    def draw_circle(self, center: Position, radius: float) -> None:
        self.operations.append(("circle", center, radius))

    def draw_line(self, start: Position, end: Position) -> None:
        self.operations.append(("line", start, end))

    def draw_trace(self, points: Sequence[Position]) -> None:
        self.operations.append(("trace", tuple(points)))

    def flush(self) -> None:
        self.operations.append(("flush",))

    def count(self, name: str) -> int:
        """Number of recorded calls with the given name."""
        return sum(1 for op in self.operations if op[0] == name)


def render_frame(surface: RenderingSurface, frame: AnimationFrame) -> None:
    """Draw one frame: epicycle circles, their vectors, then the trace."""
    surface.clear()
    for circle, segment in zip(frame.circles, frame.segments):
        surface.draw_circle(circle.center, circle.radius)
        surface.draw_line(segment.start, segment.end)
    surface.draw_trace(frame.trace)
    surface.flush()
