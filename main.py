#!/usr/bin/env python3
"""
F1 LED Circuit Simulation - Main Entry Point

Replays recorded car positions on the LED layout of a circuit.

Usage:
    python main.py                  # One CSV per driver, lockstep playback
    python main.py --combined       # Single combined track file
    python main.py --independent    # Every car follows its own delays
    python main.py --current        # Light only each car's latest position
"""
import sys
import os
import logging

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

import config

# Configure logging before the replay package is imported
def resolve_log_level(name) -> str:
    """Upper-cased level name, or the default when logging does not know it."""
    level = (name or "").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return config.DEFAULT_LOG_LEVEL
    return level


logging.basicConfig(
    level=resolve_log_level(os.getenv(config.LOG_LEVEL_ENV, config.DEFAULT_LOG_LEVEL)),
    format='[%(levelname)s] %(name)s: %(message)s',
    stream=sys.stdout
)

from replay import (
    CoordinateStore,
    LoadError,
    MatchPolicy,
    PlaybackMode,
    RaceSession,
    assign_colors,
    load_combined,
    load_tracks,
)
from ui.styles import CAR_COLORS

logger = logging.getLogger("main")


def load_session(combined: bool = False, independent: bool = False, current: bool = False) -> RaceSession:
    """
    Load every source and build the race session.

    Raises:
        LoadError: any source failed to load (fatal)
    """
    data_dir = config.DATA_DIR
    store = CoordinateStore.load(data_dir / config.COORDINATES_FILE)

    if combined:
        tracks = load_combined(data_dir / config.COMBINED_FILE)
    else:
        tracks = load_tracks(config.driver_paths(data_dir), skip_first_row=config.SKIP_FIRST_ROW)

    mode = PlaybackMode.INDEPENDENT if independent else PlaybackMode(config.PLAYBACK_MODE)
    policy = MatchPolicy.CURRENT if current else MatchPolicy(config.MATCH_POLICY)

    return RaceSession(
        store,
        tracks,
        assign_colors(len(tracks), CAR_COLORS),
        mode=mode,
        match_policy=policy,
        tolerance=config.MATCH_TOLERANCE,
    )


def main(combined: bool = False, independent: bool = False, current: bool = False):
    """
    Entry point for the LED replay.

    Args:
        combined: Read the single combined track file instead of one per driver
        independent: Advance every car on its own delays
        current: Light only the latest position of each car
    """
    print("📂 Loading circuit data...")
    session = load_session(combined=combined, independent=independent, current=current)
    print(f"✅ {len(session.store)} LEDs, {len(session.tracks)} cars loaded")

    # Qt is imported late so a bad data file fails before any window exists
    from PyQt5 import QtWidgets
    from ui.main_window import MainWindow

    print("🔧 Creating Qt application...")
    app = QtWidgets.QApplication(sys.argv)

    print("🖥️  Creating main window...")
    window = MainWindow(session)
    window.show()

    print("\n" + "="*60)
    print("✅ READY - press START to run the replay")
    print("="*60 + "\n")

    result = app.exec_()

    print("👋 Goodbye!")
    return result


def cli():
    """Console entry: parse flags, run, exit 1 on a fatal load error."""
    combined = "--combined" in sys.argv
    independent = "--independent" in sys.argv
    current = "--current" in sys.argv

    print("="*60)
    print("🏁 F1 LED CIRCUIT SIMULATION STARTING...")
    print("="*60)
    logger.debug("Command line args: %s", sys.argv)

    try:
        sys.exit(main(combined, independent, current))
    except LoadError as e:
        print("\n" + "="*60)
        print("❌ FATAL ERROR: could not load data")
        print("="*60)
        print(f"{e}")
        if e.__cause__ is not None:
            print(f"Cause: {e.__cause__}")
        print("="*60)
        sys.exit(1)


if __name__ == "__main__":
    cli()
