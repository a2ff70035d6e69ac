"""Epicycle animation of a coefficient set.

Each frame chains the rotating vectors in amplitude order starting from the
canvas centre; the tip of the last vector is the reconstructed point, which is
prepended to the trace. One run covers a single period in exactly N frames,
where N is the length of the drawn path.
"""

import logging
import math
from typing import Callable, Literal, Optional

from fourierdraw import DegenerateSpectrumError, InvalidInputError
from fourierdraw.animation.scheduler import FrameHandle, Scheduler
from fourierdraw.models import (
    AnimationFrame,
    AnimationState,
    AnimationStatus,
    CircleDraw,
    CoefficientSet,
    LineSegment,
    Position,
)
from fourierdraw.rendering.surface import RenderingSurface, render_frame

logger = logging.getLogger(__name__)

TWO_PI = 2 * math.pi
DEFAULT_PADDING = 1.1

FrameCallback = Callable[[AnimationFrame], None]
CompleteCallback = Callable[[list[Position]], None]
DegeneratePolicy = Literal["raise", "default"]


def compute_scale(
    coefficients: CoefficientSet,
    canvas_extents: tuple[float, float],
    padding: float = DEFAULT_PADDING,
) -> float:
    """Scale that fits the whole epicycle chain inside the canvas.

    ``scale = min(W, H) / (2 * radius_sum * padding)``

    Raises:
        DegenerateSpectrumError: If every amplitude is zero
    """
    total = coefficients.radius_sum
    if total == 0:
        raise DegenerateSpectrumError(
            "All coefficients have zero amplitude; nothing to animate"
        )
    width, height = canvas_extents
    return min(width, height) / (2 * total * padding)


def create_state(
    coefficients: CoefficientSet,
    path_length: int,
    canvas_extents: tuple[float, float],
    padding: float = DEFAULT_PADDING,
    on_degenerate: DegeneratePolicy = "raise",
) -> AnimationState:
    """Build the initial state of a run.

    Args:
        coefficients: Ranked coefficients to replay
        path_length: Length N of the drawn path; sets ``dt = 2*pi/N``
        canvas_extents: Canvas (width, height)
        padding: Margin factor passed to :func:`compute_scale`
        on_degenerate: ``"raise"`` to reject an all-zero spectrum, ``"default"``
            to fall back to a scale of 1

    Returns:
        AnimationState: State at ``t = 0``
    """
    if path_length < 1:
        raise InvalidInputError(f"Path length must be >= 1, got {path_length}")

    try:
        scale = compute_scale(coefficients, canvas_extents, padding)
    except DegenerateSpectrumError:
        if on_degenerate != "default":
            raise
        logger.warning("Degenerate spectrum, falling back to scale 1.0")
        scale = 1.0

    return AnimationState(
        coefficients=coefficients,
        path_length=path_length,
        dt=TWO_PI / path_length,
        scale=scale,
    )


def step_frame(state: AnimationState, canvas_extents: tuple[float, float]) -> AnimationFrame:
    """Compute one frame at ``state.time`` and advance the state."""
    width, height = canvas_extents
    t = state.time
    x, y = width / 2, height / 2
    circles = []
    segments = []

    for coefficient in state.coefficients:
        prev = (x, y)
        radius = coefficient.amp * state.scale
        angle = coefficient.freq * t + coefficient.phase
        x += radius * math.cos(angle)
        y += radius * math.sin(angle)
        circles.append(CircleDraw(center=prev, radius=radius))
        segments.append(LineSegment(start=prev, end=(x, y)))

    state.trace.insert(0, (x, y))
    frame = AnimationFrame(
        index=state.frame_count,
        time=t,
        position=(x, y),
        circles=circles,
        segments=segments,
        trace=list(state.trace),
    )

    state.frame_count += 1
    # Derived from the counter rather than accumulated to avoid drift.
    state.time = state.frame_count * state.dt
    return frame


class AnimationRun:
    """One animation run driven by a scheduler.

    Lifecycle: IDLE -> RUNNING -> TERMINATED, or RUNNING -> CANCELLED.
    """

    def __init__(
        self,
        state: AnimationState,
        canvas_extents: tuple[float, float],
        scheduler: Scheduler,
        surface: Optional[RenderingSurface] = None,
        on_frame: Optional[FrameCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
    ):
        self.state = state
        self.canvas_extents = canvas_extents
        self.scheduler = scheduler
        self.surface = surface
        self.on_frame = on_frame
        self.on_complete = on_complete
        self._handle: Optional[FrameHandle] = None

    @property
    def status(self) -> AnimationStatus:
        return self.state.status

    @property
    def trace(self) -> list[Position]:
        return self.state.trace

    def start(self) -> "AnimationRun":
        if self.state.status is not AnimationStatus.IDLE:
            raise RuntimeError(f"Cannot start a run that is {self.state.status.value}")
        self.state.status = AnimationStatus.RUNNING
        logger.debug(
            "Starting animation: %d frames, %d coefficients, scale %.4f",
            self.state.total_frames,
            len(self.state.coefficients),
            self.state.scale,
        )
        self._schedule_next()
        return self

    def cancel(self) -> None:
        """Stop scheduling frames. The trace keeps whatever it has reached."""
        if self.state.is_finished:
            return
        if self._handle is not None:
            self._handle.cancel()
        self.state.status = AnimationStatus.CANCELLED
        logger.debug("Animation cancelled after %d frames", self.state.frame_count)

    def _schedule_next(self) -> None:
        self._handle = self.scheduler.schedule(self._tick)

    def _tick(self) -> None:
        if self.state.status is not AnimationStatus.RUNNING:
            return

        frame = step_frame(self.state, self.canvas_extents)
        if self.surface is not None:
            render_frame(self.surface, frame)
        if self.on_frame is not None:
            self.on_frame(frame)

        # on_frame may have cancelled the run
        if self.state.status is not AnimationStatus.RUNNING:
            return

        # Same as t < 2*pi, counted in frames: N frames per period.
        if self.state.frame_count < self.state.total_frames:
            self._schedule_next()
        else:
            self._finish()

    def _finish(self) -> None:
        if self.surface is not None:
            self.surface.draw_trace(self.state.trace)
            self.surface.flush()
        self.state.status = AnimationStatus.TERMINATED
        self._handle = None
        logger.debug("Animation terminated after %d frames", self.state.frame_count)
        if self.on_complete is not None:
            self.on_complete(list(self.state.trace))


class EpicycleAnimator:
    """Replay a coefficient set as a chain of rotating vectors.

    The animator holds no per-run state; every call to :meth:`animate` gets a
    fresh :class:`AnimationRun`.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        surface: Optional[RenderingSurface] = None,
        padding: float = DEFAULT_PADDING,
        on_degenerate: DegeneratePolicy = "raise",
    ):
        """Initialize animator.

        Args:
            scheduler: Frame scheduler
            surface: Optional surface each frame is rendered onto
            padding: Margin factor for the epicycle scale
            on_degenerate: Policy for an all-zero spectrum
        """
        self.scheduler = scheduler
        self.surface = surface
        self.padding = padding
        self.on_degenerate = on_degenerate

    def prepare(
        self,
        coefficients: CoefficientSet,
        path_length: int,
        canvas_extents: tuple[float, float],
        on_frame: Optional[FrameCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
    ) -> AnimationRun:
        """Build an idle run, validating everything it needs up front.

        Nothing is scheduled until :meth:`AnimationRun.start` is called.

        Raises:
            DegenerateSpectrumError: If the spectrum is all zero and the policy
                is ``"raise"``
            InvalidInputError: If ``path_length`` is not positive
        """
        state = create_state(
            coefficients,
            path_length,
            canvas_extents,
            padding=self.padding,
            on_degenerate=self.on_degenerate,
        )
        return AnimationRun(
            state,
            canvas_extents,
            self.scheduler,
            surface=self.surface,
            on_frame=on_frame,
            on_complete=on_complete,
        )

    def animate(
        self,
        coefficients: CoefficientSet,
        path_length: int,
        canvas_extents: tuple[float, float],
        on_frame: Optional[FrameCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
    ) -> AnimationRun:
        """Start animating.

        Args:
            coefficients: Ranked coefficients to replay
            path_length: Length N of the drawn path
            canvas_extents: Canvas (width, height)
            on_frame: Called with every frame
            on_complete: Called once with the final trace

        Returns:
            AnimationRun: Handle to the started run

        Raises:
            DegenerateSpectrumError: If the spectrum is all zero and the policy
                is ``"raise"``
            InvalidInputError: If ``path_length`` is not positive
        """
        run = self.prepare(
            coefficients,
            path_length,
            canvas_extents,
            on_frame=on_frame,
            on_complete=on_complete,
        )
        return run.start()
