"""Interactive drawing canvas built on matplotlib widgets."""

import logging
from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.widgets import Button, Slider

from fourierdraw import FourierDrawError
from fourierdraw.animation import Approximator, MatplotlibScheduler
from fourierdraw.capture.recorder import PathRecorder
from fourierdraw.config import FourierDrawSettings, get_config
from fourierdraw.rendering.matplotlib_surface import MatplotlibSurface

logger = logging.getLogger(__name__)


class DrawingCanvas:
    """Window with a drawing area, a coefficient slider and two buttons.

    Drag with the left mouse button to draw, pick the number of terms with
    the slider, then press "Approximate" to watch the epicycles redraw it.
    """

    def __init__(self, settings: Optional[FourierDrawSettings] = None):
        self.settings = settings or get_config()
        width, height = self.settings.canvas_extents
        dpi = 100

        self.fig = plt.figure(figsize=(width / dpi, (height + 80) / dpi), dpi=dpi)
        controls = 80 / (height + 80)
        ax = self.fig.add_axes((0, controls, 1, 1 - controls))
        self.surface = MatplotlibSurface(ax, width, height)
        self.recorder = PathRecorder()
        self.approximator = Approximator(
            MatplotlibScheduler(self.fig.canvas, self.settings.frame_interval_ms),
            surface=self.surface,
            settings=self.settings,
        )
        self._stroke = None
        self._message = None

        initial = self.settings.num_coefficients
        if initial > self.settings.max_coefficients:
            logger.warning(
                "%d coefficients exceeds the slider maximum; starting at %d",
                initial,
                self.settings.max_coefficients,
            )
            initial = self.settings.max_coefficients

        slider_ax = self.fig.add_axes((0.15, controls * 0.55, 0.45, controls * 0.3))
        self.slider = Slider(
            slider_ax,
            "Terms",
            1,
            self.settings.max_coefficients,
            valinit=initial,
            valstep=1,
        )
        approximate_ax = self.fig.add_axes((0.65, controls * 0.2, 0.15, controls * 0.6))
        clear_ax = self.fig.add_axes((0.82, controls * 0.2, 0.15, controls * 0.6))
        self.approximate_button = Button(approximate_ax, "Approximate")
        self.clear_button = Button(clear_ax, "Clear")

        self.approximate_button.on_clicked(lambda _event: self.approximate())
        self.clear_button.on_clicked(lambda _event: self.clear())

        canvas = self.fig.canvas
        canvas.mpl_connect("button_press_event", self._on_press)
        canvas.mpl_connect("motion_notify_event", self._on_move)
        canvas.mpl_connect("button_release_event", self._on_release)
        canvas.mpl_connect("axes_leave_event", self._on_leave)

    @property
    def num_coefficients(self) -> int:
        return int(self.slider.val)

    def _in_drawing_area(self, event) -> bool:
        return event.inaxes is self.surface.ax and event.xdata is not None

    def _on_press(self, event) -> None:
        if event.button != 1 or not self._in_drawing_area(event):
            return
        self.approximator.clear()
        self._set_message(None)
        self.recorder.press(event.xdata, event.ydata)
        self._stroke = self.surface.draw_stroke(
            [p.as_tuple() for p in self.recorder.path],
            linewidth=self.settings.brush_size,
        )
        self.surface.flush()

    def _on_move(self, event) -> None:
        if not self.recorder.is_drawing or not self._in_drawing_area(event):
            return
        self.recorder.move(event.xdata, event.ydata)
        if self._stroke is not None:
            self._stroke.set_data(
                [p.x for p in self.recorder.path],
                [p.y for p in self.recorder.path],
            )
            self.surface.flush()

    def _on_release(self, event) -> None:
        self.recorder.release()

    def _on_leave(self, event) -> None:
        if event.inaxes is self.surface.ax:
            self.recorder.release()

    def _set_message(self, text: Optional[str]) -> None:
        if self._message is not None:
            self._message.remove()
            self._message = None
        if text:
            self._message = self.surface.ax.text(
                self.surface.width / 2,
                self.surface.height / 2,
                text,
                ha="center",
                va="center",
                fontsize=14,
                color="#888888",
            )
        self.surface.flush()

    def approximate(self) -> None:
        self._stroke = None
        try:
            self.approximator.approximate(self.recorder.path, self.num_coefficients)
        except FourierDrawError as e:
            logger.warning("%s", e)
            self._set_message(str(e))

    def clear(self) -> None:
        self.approximator.clear()
        self.recorder.clear()
        self._stroke = None
        self._set_message(None)

    def show(self) -> None:
        plt.show()
