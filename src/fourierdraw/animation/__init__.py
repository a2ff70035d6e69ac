"""Epicycle animation and frame scheduling."""

from fourierdraw.animation.animator import (
    AnimationRun,
    EpicycleAnimator,
    compute_scale,
    create_state,
    step_frame,
)
from fourierdraw.animation.scheduler import (
    FrameHandle,
    ImmediateScheduler,
    ManualScheduler,
    MatplotlibScheduler,
    Scheduler,
)
from fourierdraw.animation.session import Approximator

__all__ = [
    "AnimationRun",
    "Approximator",
    "EpicycleAnimator",
    "FrameHandle",
    "ImmediateScheduler",
    "ManualScheduler",
    "MatplotlibScheduler",
    "Scheduler",
    "compute_scale",
    "create_state",
    "step_frame",
]
