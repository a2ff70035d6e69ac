"""Rendering surfaces for epicycle animations."""

from fourierdraw.rendering.surface import RecordingSurface, RenderingSurface, render_frame

__all__ = ["RecordingSurface", "RenderingSurface", "render_frame"]
