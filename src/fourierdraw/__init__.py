"""fourierdraw - Approximate hand-drawn curves with epicycles.

A truncated discrete Fourier series, replayed as a chain of rotating vectors.
"""

__version__ = "0.1.0"


class FourierDrawError(Exception):
    """Base exception for all fourierdraw errors."""

    pass


class InvalidInputError(FourierDrawError):
    """Raised when a path is empty or the coefficient count is not positive."""

    pass


class DegenerateSpectrumError(FourierDrawError):
    """Raised when every coefficient has zero amplitude."""

    pass


class PathParseError(FourierDrawError):
    """Raised when a path file cannot be read."""

    pass


class ConfigurationError(FourierDrawError):
    """Raised when configuration is invalid or missing."""

    pass
