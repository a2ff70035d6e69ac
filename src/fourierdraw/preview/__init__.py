"""Terminal previews."""

from fourierdraw.preview.terminal import CoefficientPreview

__all__ = ["CoefficientPreview"]
