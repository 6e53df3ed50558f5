"""
Core playback logic for the LED circuit replay.

Nothing in this package imports Qt; the UI shell lives in ``ui``.
"""
from replay.errors import LoadError, ParseError, DegenerateBoundsError
from replay.model import FixedPoint, Sample, Track
from replay.loader import CoordinateStore, load_track, load_tracks, load_combined
from replay.clock import PlaybackClock
from replay.engine import Bounds, Frame, MatchPolicy, project, match_owners, render_frame
from replay.session import PlaybackMode, RaceSession
from replay.palette import assign_colors

__all__ = [
    'LoadError', 'ParseError', 'DegenerateBoundsError',
    'FixedPoint', 'Sample', 'Track',
    'CoordinateStore', 'load_track', 'load_tracks', 'load_combined',
    'PlaybackClock',
    'Bounds', 'Frame', 'MatchPolicy', 'project', 'match_owners', 'render_frame',
    'PlaybackMode', 'RaceSession',
    'assign_colors',
]
