"""
LED grid canvas: one filled square per LED of the track layout.
"""
import numpy as np
from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from ui.styles import BG_COLOR_LIGHT, LED_OFF_COLOR, LED_EDGE_COLOR


class LedGridCanvas(FigureCanvas):
    """
    Matplotlib canvas painting the LED layout in screen coordinates.

    The axes span the whole figure with a pixel coordinate system whose
    origin is the top-left corner, so frames from the render engine can
    be drawn without further transformation.

    Each paint is two passes: every LED in the unlit color, then the lit
    LEDs on top in their car's color.
    """

    def __init__(self, parent=None, led_size=20.0, width=8, height=6, dpi=100):
        """
        Initialize LED grid canvas.

        Args:
            parent: Parent QWidget
            led_size: Edge length of one LED square in pixels
            width: Figure width in inches
            height: Figure height in inches
            dpi: Dots per inch resolution
        """
        self.fig = Figure(figsize=(width, height), dpi=dpi)
        self.ax = self.fig.add_axes([0.0, 0.0, 1.0, 1.0])
        super().__init__(self.fig)
        self.setParent(parent)

        self.led_size = float(led_size)

        self.fig.patch.set_facecolor(BG_COLOR_LIGHT)
        self.ax.set_facecolor(BG_COLOR_LIGHT)
        self.ax.set_axis_off()

        # Squares are anchored at their top-left corner like the engine's
        # coordinates, so scatter offsets are shifted by half an LED
        marker_pts = self.led_size * 72.0 / dpi
        self._base = self.ax.scatter(
            [], [], s=marker_pts ** 2, marker="s",
            c=LED_OFF_COLOR, edgecolors=LED_EDGE_COLOR, linewidths=0.5,
        )
        self._lit = self.ax.scatter(
            [], [], s=marker_pts ** 2, marker="s", linewidths=0,
        )

    def viewport(self):
        """Drawable size in pixels."""
        return float(self.width()), float(self.height())

    def paint(self, frame, colors):
        """
        Draw one frame.

        Args:
            frame: replay.engine.Frame in screen coordinates
            colors: Track colors, indexed by the frame's owner values
        """
        w, h = self.viewport()
        self.ax.set_xlim(0, w)
        self.ax.set_ylim(h, 0)

        half = self.led_size / 2.0
        offsets = np.column_stack([frame.xs + half, frame.ys + half]) if len(frame) else np.empty((0, 2))

        # Pass 1: every LED off
        self._base.set_offsets(offsets)

        # Pass 2: LEDs owned by a car
        lit = frame.lit
        self._lit.set_offsets(offsets[lit])
        self._lit.set_facecolors([colors[o] for o in frame.owners[lit]])

        self.draw_idle()
