"""
Render/match engine.

Each frame the LED layout is projected to screen space and every LED is
assigned the index of the car that lights it (or -1 for unlit). Nothing is
cached between frames apart from the cursors owned by the session.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

import numpy as np

from replay.model import Track

UNLIT = -1


class MatchPolicy(Enum):
    TRAIL = "trail"        # any sample in [0, cursor) lights the LED
    CURRENT = "current"    # only the sample at cursor - 1 lights the LED


@dataclass(frozen=True)
class Bounds:
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @classmethod
    def of(cls, xy: np.ndarray) -> "Bounds":
        return cls(
            float(xy[:, 0].min()), float(xy[:, 0].max()),
            float(xy[:, 1].min()), float(xy[:, 1].max()),
        )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def is_degenerate(self) -> bool:
        return self.width == 0 or self.height == 0

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.min_x, self.max_x, self.min_y, self.max_y)


def project(xy: np.ndarray, bounds: Bounds, viewport_width: float, viewport_height: float):
    """
    Map layout coordinates to screen coordinates.

    Screen origin is top-left, layout origin bottom-left, so Y is flipped.
    An axis with zero extent is centered in the viewport.

    Returns:
        (xs, ys) float arrays
    """
    xs = xy[:, 0]
    ys = xy[:, 1]

    if bounds.width > 0:
        sx = (xs - bounds.min_x) / bounds.width * viewport_width
    else:
        sx = np.full(xs.shape, viewport_width / 2.0)

    if bounds.height > 0:
        sy = viewport_height - (ys - bounds.min_y) / bounds.height * viewport_height
    else:
        sy = np.full(ys.shape, viewport_height / 2.0)

    return sx, sy


def _visible_window(track: Track, cursor: int, policy: MatchPolicy) -> np.ndarray:
    end = max(0, min(cursor, len(track)))
    if policy is MatchPolicy.CURRENT:
        return track.xy[max(0, end - 1):end]
    return track.xy[:end]


def match_owners(
    xy: np.ndarray,
    tracks: Sequence[Track],
    cursors: Sequence[int],
    policy: MatchPolicy = MatchPolicy.TRAIL,
    tolerance: float = 0.0,
) -> np.ndarray:
    """
    For each LED, the index of the track lighting it, or UNLIT.

    Tracks are applied in order, so on a collision the later track wins.
    With ``tolerance == 0`` positions must be exactly equal on both axes.
    """
    owners = np.full(len(xy), UNLIT, dtype=np.int64)
    if len(xy) == 0:
        return owners

    for track_idx, (track, cursor) in enumerate(zip(tracks, cursors)):
        window = _visible_window(track, cursor, policy)
        if window.size == 0:
            continue

        if tolerance > 0:
            near_x = np.abs(xy[:, None, 0] - window[None, :, 0]) <= tolerance
            near_y = np.abs(xy[:, None, 1] - window[None, :, 1]) <= tolerance
            hit = (near_x & near_y).any(axis=1)
        else:
            hit = ((xy[:, None, 0] == window[None, :, 0]) & (xy[:, None, 1] == window[None, :, 1])).any(axis=1)
        owners[hit] = track_idx

    return owners


@dataclass(frozen=True)
class Frame:
    """Everything the canvas needs to paint one frame."""

    xs: np.ndarray
    ys: np.ndarray
    owners: np.ndarray
    bounds: Optional[Bounds] = None

    @property
    def lit(self) -> np.ndarray:
        return self.owners != UNLIT

    def __len__(self) -> int:
        return len(self.owners)


def render_frame(
    store,
    tracks: Sequence[Track],
    cursors: Sequence[int],
    viewport_width: float,
    viewport_height: float,
    policy: MatchPolicy = MatchPolicy.TRAIL,
    tolerance: float = 0.0,
) -> Frame:
    """
    Project the layout and resolve LED ownership for the given cursors.

    ``store`` is anything with an ``xy`` array and a ``bounds()`` method
    (normally a CoordinateStore).
    """
    xy = store.xy
    if len(xy) == 0:
        empty = np.empty((0,), dtype=np.float64)
        return Frame(empty, empty, np.empty((0,), dtype=np.int64))

    bounds = store.bounds()
    sx, sy = project(xy, bounds, viewport_width, viewport_height)
    owners = match_owners(xy, tracks, cursors, policy=policy, tolerance=tolerance)
    return Frame(sx, sy, owners, bounds)
