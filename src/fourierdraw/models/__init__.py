"""Data models for fourierdraw."""

from fourierdraw.models.path import DrawnPath, Point
from fourierdraw.models.coefficients import CoefficientSet, FourierCoefficient
from fourierdraw.models.animation import (
    AnimationFrame,
    AnimationState,
    AnimationStatus,
    CircleDraw,
    LineSegment,
    Position,
)

__all__ = [
    "Point",
    "DrawnPath",
    "FourierCoefficient",
    "CoefficientSet",
    "AnimationFrame",
    "AnimationState",
    "AnimationStatus",
    "CircleDraw",
    "LineSegment",
    "Position",
]
