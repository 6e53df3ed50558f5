# config.py
"""
Configuration settings for the LED circuit replay.
"""
from pathlib import Path

# ── Data sources ────────────────────────────────────────────────────────────

# Directory holding the CSV exports (relative to the working directory)
DATA_DIR = Path(".")

# LED layout, header: x_led,y_led
COORDINATES_FILE = "led_coords.csv"

# Per-driver variant: one file per car, header date,x_led,y_led,time_delta
DRIVERS = [
    "albon", "alonso", "bottas", "gasley", "guanyu",
    "hamilton", "hulkenberg", "lawson", "leclerc", "magnussen",
    "norris", "ocon", "perez", "piastri", "russell",
    "sainz", "sargeant", "stroll", "tsunoda", "verstappen",
]
DRIVER_FILE_TEMPLATE = "time_delta_{driver}_start.csv"

# The per-driver exports open with a marker row that is not a position
SKIP_FIRST_ROW = True

# Combined variant: single track, time_delta required on every row
COMBINED_FILE = "run_race.csv"

# ── Playback ────────────────────────────────────────────────────────────────

# "lockstep": all cars follow the first track's delays
# "independent": every car follows its own delays
PLAYBACK_MODE = "lockstep"

# "trail": LEDs stay lit for every position a car has passed
# "current": only the car's latest position is lit
MATCH_POLICY = "trail"

# 0.0 = exact coordinate equality
MATCH_TOLERANCE = 0.0

# ── Display ─────────────────────────────────────────────────────────────────

WINDOW_TITLE = "F1-LED-CIRCUIT SIMULATION"
WINDOW_SIZE = (1200, 800)

LED_SIZE_PX = 20.0

# Render loop timer interval; 0 = redraw as fast as the event loop allows
FRAME_INTERVAL_MS = 16

# ── Logging ─────────────────────────────────────────────────────────────────

LOG_LEVEL_ENV = "F1LED_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def driver_paths(data_dir: Path = DATA_DIR):
    return [Path(data_dir) / DRIVER_FILE_TEMPLATE.format(driver=d) for d in DRIVERS]
