"""Coefficient output writers."""

from fourierdraw.output.writer import CoefficientWriter

__all__ = ["CoefficientWriter"]
