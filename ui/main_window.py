"""
Main window for the LED circuit replay.
"""
import time

from PyQt5 import QtCore
from PyQt5.QtWidgets import (
    QMainWindow,
    QWidget,
    QFrame,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
)

import config
from replay.session import READOUT_PLACEHOLDER
from ui.canvases import LedGridCanvas
from ui.styles import DARK_STYLESHEET


class MainWindow(QMainWindow):
    """
    Replay window.

    Displays:
    - Top panel with the reference timestamp and START / STOP buttons
    - LED grid of the circuit, lit by car color

    A QTimer drives the render loop: every timeout advances the session
    clock (at most one sample) and repaints the whole grid.
    """

    def __init__(self, session, clock=time.monotonic):
        super().__init__()

        self.session = session
        self._now = clock

        self.setWindowTitle(config.WINDOW_TITLE)
        self.resize(*config.WINDOW_SIZE)

        central = QWidget()
        self.setCentralWidget(central)

        root_layout = QVBoxLayout()
        root_layout.setContentsMargins(8, 8, 8, 8)
        root_layout.setSpacing(6)
        central.setLayout(root_layout)

        root_layout.addWidget(self._build_top_panel())

        self.led_canvas = LedGridCanvas(self, led_size=config.LED_SIZE_PX)
        root_layout.addWidget(self.led_canvas, 1)

        self.setStyleSheet(DARK_STYLESHEET)

        # Continuous redraw, independent of the playback event rate
        self.timer = QtCore.QTimer(self)
        self.timer.setInterval(config.FRAME_INTERVAL_MS)
        self.timer.timeout.connect(self.update_frame)
        self.timer.start()

    def _build_top_panel(self):
        """Build top panel: timestamp readout + START / STOP."""
        panel = QFrame()
        panel.setObjectName("topPanel")
        layout = QHBoxLayout()
        layout.setContentsMargins(0, 0, 0, 4)
        panel.setLayout(layout)

        self.time_label = QLabel(READOUT_PLACEHOLDER)
        self.time_label.setAlignment(QtCore.Qt.AlignCenter)

        self.start_button = QPushButton("START")
        self.start_button.clicked.connect(self.handle_start)

        self.stop_button = QPushButton("STOP")
        self.stop_button.setObjectName("stopButton")
        self.stop_button.clicked.connect(self.handle_stop)

        layout.addWidget(self.time_label)
        layout.addStretch()
        layout.addWidget(self.start_button)
        layout.addWidget(self.stop_button)

        return panel

    # ==========================================================================
    # Commands
    # ==========================================================================

    def handle_start(self):
        self.session.start(self._now())

    def handle_stop(self):
        self.session.stop()

    # ==========================================================================
    # Render loop
    # ==========================================================================

    def update_frame(self):
        """One tick: advance the clock if due, then repaint everything."""
        self.session.tick(self._now())

        readout = self.session.readout()
        self.time_label.setText(readout if readout is not None else READOUT_PLACEHOLDER)

        w, h = self.led_canvas.viewport()
        frame = self.session.frame(w, h)
        self.led_canvas.paint(frame, self.session.colors)

    def closeEvent(self, event):
        self.timer.stop()
        super().closeEvent(event)
