"""Pointer capture."""

from fourierdraw.capture.recorder import PathRecorder

__all__ = ["PathRecorder"]
