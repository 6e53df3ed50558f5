"""
Matplotlib canvas widgets for the LED replay.
"""
from ui.canvases.led_grid import LedGridCanvas

__all__ = ['LedGridCanvas']
