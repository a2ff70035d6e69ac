"""Truncated Fourier transform of drawn paths."""

from fourierdraw.transform.dft import (
    canvas_origin,
    compute_coefficients,
    evaluate,
    reconstruction_error,
)

__all__ = ["canvas_origin", "compute_coefficients", "evaluate", "reconstruction_error"]
