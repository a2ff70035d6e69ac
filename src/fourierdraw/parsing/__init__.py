"""Readers for drawn paths."""

from fourierdraw.parsing.path_reader import PathReader

__all__ = ["PathReader"]
