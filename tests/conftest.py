"""Pytest configuration and fixtures."""

import math

import matplotlib
import pytest

from fourierdraw.config import reset_config
from fourierdraw.models import DrawnPath

matplotlib.use("Agg")


@pytest.fixture(autouse=True)
def reset_config_after_test(monkeypatch):
    """Reset global config after each test and ignore the caller's environment."""
    for name in (
        "FOURIERDRAW_NUM_COEFFICIENTS",
        "FOURIERDRAW_CANVAS_WIDTH",
        "FOURIERDRAW_CANVAS_HEIGHT",
        "FOURIERDRAW_PADDING",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    reset_config()


@pytest.fixture
def square_path():
    """Corners of a 10x10 square, sampled once each."""
    return DrawnPath.from_xy([(0, 0), (10, 0), (10, 10), (0, 10)])


@pytest.fixture
def circle_path():
    """Circle of radius 100 around (400, 300), 64 samples."""
    n = 64
    return DrawnPath.from_xy(
        [
            (400 + 100 * math.cos(2 * math.pi * i / n), 300 + 100 * math.sin(2 * math.pi * i / n))
            for i in range(n)
        ]
    )


@pytest.fixture
def scribble_path():
    """Irregular, non-symmetric path."""
    return DrawnPath.from_xy(
        [
            (120.0, 80.0),
            (135.5, 92.0),
            (160.0, 101.5),
            (171.0, 140.0),
            (150.0, 180.25),
            (118.0, 171.0),
            (95.0, 150.0),
            (101.0, 120.0),
            (110.0, 99.0),
            (140.0, 60.0),
            (190.0, 75.0),
        ]
    )
