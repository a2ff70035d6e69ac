"""Animation state and per-frame drawing instructions."""

from dataclasses import dataclass, field
from enum import Enum

from fourierdraw.models.coefficients import CoefficientSet


Position = tuple[float, float]


class AnimationStatus(str, Enum):
    """Lifecycle of one animation run."""

    IDLE = "idle"
    RUNNING = "running"
    TERMINATED = "terminated"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class CircleDraw:
    """Circle of one epicycle, centred on the tip of the previous vector."""

    center: Position
    radius: float


@dataclass(frozen=True)
class LineSegment:
    """Rotating vector drawn from its centre to its tip."""

    start: Position
    end: Position


@dataclass
class AnimationFrame:
    """Everything needed to render a single frame.

    The trace is ordered most-recent-first.
    """

    index: int
    time: float
    position: Position
    circles: list[CircleDraw] = field(default_factory=list)
    segments: list[LineSegment] = field(default_factory=list)
    trace: list[Position] = field(default_factory=list)


@dataclass
class AnimationState:
    """Mutable state of one animation run, threaded through every frame."""

    coefficients: CoefficientSet
    path_length: int
    dt: float
    scale: float
    time: float = 0.0
    frame_count: int = 0
    trace: list[Position] = field(default_factory=list)
    status: AnimationStatus = AnimationStatus.IDLE

    @property
    def total_frames(self) -> int:
        """Frames needed for one full cycle (the path length)."""
        return self.path_length

    @property
    def is_finished(self) -> bool:
        return self.status in (AnimationStatus.TERMINATED, AnimationStatus.CANCELLED)
