"""Matplotlib implementation of the rendering surface."""

from typing import Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.lines import Line2D
from matplotlib.patches import Circle

from fourierdraw.models import Position


class MatplotlibSurface:
    """Draw epicycles onto a matplotlib Axes laid out like a screen canvas.

    The y axis points down so that canvas coordinates from mouse capture map
    one to one onto the plot.
    """

    # Colors for each element
    COLORS = {
        "background": "#ffffff",
        "circle": (0.0, 0.0, 0.0, 0.1),
        "radius": (0.0, 0.0, 0.0, 0.3),
        "trace": "#ff0000",
        "stroke": "#000000",
    }

    def __init__(self, ax: Axes, width: float, height: float):
        """Initialize surface.

        Args:
            ax: Axes to draw on
            width: Canvas width in pixels
            height: Canvas height in pixels
        """
        self.ax = ax
        self.width = width
        self.height = height
        self._artists = []
        self._configure_axes()

    @classmethod
    def create(cls, width: float, height: float, dpi: int = 100) -> "MatplotlibSurface":
        """Create a figure sized to the canvas and wrap its axes."""
        fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        ax = fig.add_axes((0, 0, 1, 1))
        return cls(ax, width, height)

    @property
    def figure(self):
        return self.ax.figure

    def _configure_axes(self) -> None:
        self.ax.set_xlim(0, self.width)
        self.ax.set_ylim(self.height, 0)
        self.ax.set_aspect("equal")
        self.ax.set_facecolor(self.COLORS["background"])
        self.ax.axis("off")

    def clear(self) -> None:
        for artist in self._artists:
            artist.remove()
        self._artists = []

    def draw_circle(self, center: Position, radius: float) -> None:
        circle = Circle(
            center,
            radius,
            fill=False,
            color=self.COLORS["circle"],
            linewidth=1,
        )
        self.ax.add_patch(circle)
        self._artists.append(circle)

    def draw_line(self, start: Position, end: Position) -> None:
        line = Line2D(
            [start[0], end[0]],
            [start[1], end[1]],
            color=self.COLORS["radius"],
            linewidth=1,
        )
        self.ax.add_line(line)
        self._artists.append(line)

    def draw_trace(self, points: Sequence[Position]) -> None:
        if not points:
            return
        line = Line2D(
            [p[0] for p in points],
            [p[1] for p in points],
            color=self.COLORS["trace"],
            linewidth=1.5,
        )
        self.ax.add_line(line)
        self._artists.append(line)

    def draw_stroke(self, points: Sequence[Position], linewidth: Optional[float] = None) -> Line2D:
        """Draw the user's freehand stroke and return the line for updates."""
        line = Line2D(
            [p[0] for p in points],
            [p[1] for p in points],
            color=self.COLORS["stroke"],
            linewidth=linewidth or 8.0,
            solid_capstyle="round",
        )
        self.ax.add_line(line)
        self._artists.append(line)
        return line

    def flush(self) -> None:
        self.ax.figure.canvas.draw_idle()
