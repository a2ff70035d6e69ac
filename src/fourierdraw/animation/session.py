"""Approximation session: one active animation run at a time."""

import logging
from typing import Optional

from fourierdraw import InvalidInputError
from fourierdraw.animation.animator import (
    AnimationRun,
    CompleteCallback,
    EpicycleAnimator,
    FrameCallback,
)
from fourierdraw.animation.scheduler import Scheduler
from fourierdraw.config import FourierDrawSettings, get_config
from fourierdraw.models import CoefficientSet
from fourierdraw.rendering.surface import RenderingSurface
from fourierdraw.transform.dft import PathLike, canvas_origin, compute_coefficients

logger = logging.getLogger(__name__)

EMPTY_PATH_MESSAGE = "Please draw something first."


class Approximator:
    """Turn paths into animations, owning the canvas while a run is active.

    Starting a new approximation cancels the previous run so that only one
    run ever writes to the surface and its trace.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        surface: Optional[RenderingSurface] = None,
        settings: Optional[FourierDrawSettings] = None,
    ):
        """Initialize approximator.

        Args:
            scheduler: Frame scheduler shared by every run
            surface: Surface the runs draw onto
            settings: Canvas and padding configuration (default: global config)
        """
        self.scheduler = scheduler
        self.surface = surface
        self.settings = settings or get_config()
        self.coefficients: Optional[CoefficientSet] = None
        self.run: Optional[AnimationRun] = None

    @property
    def canvas_extents(self) -> tuple[int, int]:
        return self.settings.canvas_extents

    @property
    def is_running(self) -> bool:
        return self.run is not None and not self.run.state.is_finished

    def approximate(
        self,
        path: PathLike,
        num_coefficients: Optional[int] = None,
        on_frame: Optional[FrameCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
    ) -> AnimationRun:
        """Compute coefficients for a path and start animating them.

        The coefficients are computed before the running animation is touched,
        so invalid input leaves the current run alone.

        Args:
            path: Drawn path in canvas coordinates
            num_coefficients: Number of terms (default: from config)
            on_frame: Called with every frame
            on_complete: Called once with the final trace

        Returns:
            AnimationRun: The new run

        Raises:
            InvalidInputError: If the path is empty or the count is invalid
            DegenerateSpectrumError: If the path has no spectrum to animate
        """
        points = list(path)
        if not points:
            raise InvalidInputError(EMPTY_PATH_MESSAGE)

        k = num_coefficients if num_coefficients is not None else self.settings.num_coefficients
        width, height = self.canvas_extents
        coefficients = compute_coefficients(points, k, origin=canvas_origin(width, height))
        animator = EpicycleAnimator(
            self.scheduler,
            surface=self.surface,
            padding=self.settings.padding,
        )
        run = animator.prepare(
            coefficients,
            len(points),
            self.canvas_extents,
            on_frame=on_frame,
            on_complete=on_complete,
        )

        self.cancel()
        self.coefficients = coefficients
        if self.surface is not None:
            self.surface.clear()

        logger.info("Approximating %d points with %d coefficients", len(points), k)
        self.run = run.start()
        return self.run

    def cancel(self) -> None:
        """Cancel the active run, if any."""
        if self.run is not None:
            self.run.cancel()

    def clear(self) -> None:
        """Cancel the active run and wipe the surface."""
        self.cancel()
        self.run = None
        self.coefficients = None
        if self.surface is not None:
            self.surface.clear()
            self.surface.flush()
