# tests/test_engine.py
import numpy as np
import pytest

from replay import Bounds, CoordinateStore, FixedPoint, MatchPolicy, match_owners, project, render_frame
from replay.engine import UNLIT

from conftest import make_track


def test_projection_stays_inside_viewport():
    rng = np.random.default_rng(7)
    xy = rng.uniform(-500, 500, size=(200, 2))
    bounds = Bounds.of(xy)
    sx, sy = project(xy, bounds, 640, 480)

    assert np.all((sx >= 0) & (sx <= 640))
    assert np.all((sy >= 0) & (sy <= 480))


def test_projection_flips_y(square_store):
    sx, sy = project(square_store.xy, square_store.bounds(), 100, 50)

    # (0,0) bottom-left, (10,10) top-right
    assert (sx[0], sy[0]) == (0.0, 50.0)
    assert (sx[3], sy[3]) == (100.0, 0.0)
    assert (sx[1], sy[1]) == (100.0, 50.0)


def test_degenerate_axis_is_centered():
    store = CoordinateStore([FixedPoint(3, 0), FixedPoint(3, 10)])
    bounds = store.bounds()
    assert bounds.width == 0
    assert bounds.is_degenerate

    sx, sy = project(store.xy, bounds, 200, 100)
    assert np.all(np.isfinite(sx)) and np.all(np.isfinite(sy))
    assert list(sx) == [100.0, 100.0]
    assert list(sy) == [100.0, 0.0]


def test_single_point_is_centered():
    store = CoordinateStore([FixedPoint(1, 1)])
    sx, sy = project(store.xy, store.bounds(), 200, 100)
    assert (sx[0], sy[0]) == (100.0, 50.0)


def test_nothing_lit_before_first_advance(square_store):
    track = make_track("a", [(0, 0), (10, 0)])
    owners = match_owners(square_store.xy, [track], [0])
    assert list(owners) == [UNLIT] * 4


def test_trail_lights_every_passed_position(square_store):
    track = make_track("a", [(0, 0), (10, 0), (10, 10)])
    owners = match_owners(square_store.xy, [track], [2])
    assert list(owners) == [0, 0, UNLIT, UNLIT]


def test_current_lights_only_latest(square_store):
    track = make_track("a", [(0, 0), (10, 0), (10, 10)])
    owners = match_owners(square_store.xy, [track], [2], policy=MatchPolicy.CURRENT)
    assert list(owners) == [UNLIT, 0, UNLIT, UNLIT]


def test_cursor_past_track_end_is_clamped(square_store):
    track = make_track("a", [(0, 10)])
    owners = match_owners(square_store.xy, [track], [99])
    assert list(owners) == [UNLIT, UNLIT, 0, UNLIT]

    owners = match_owners(square_store.xy, [track], [99], policy=MatchPolicy.CURRENT)
    assert list(owners) == [UNLIT, UNLIT, 0, UNLIT]


def test_last_track_wins_collision(square_store):
    a = make_track("a", [(10, 10)])
    b = make_track("b", [(10, 10)])
    c = make_track("c", [(0, 0)])
    owners = match_owners(square_store.xy, [a, b, c], [1, 1, 1])
    assert list(owners) == [2, UNLIT, UNLIT, 1]


def test_exact_match_rejects_near_values(square_store):
    track = make_track("a", [(10.000001, 0)])
    assert list(match_owners(square_store.xy, [track], [1])) == [UNLIT] * 4


def test_tolerance_accepts_near_values(square_store):
    track = make_track("a", [(10.000001, 0)])
    owners = match_owners(square_store.xy, [track], [1], tolerance=1e-3)
    assert list(owners) == [UNLIT, 0, UNLIT, UNLIT]


def test_render_frame(square_store):
    track = make_track("a", [(0, 0)])
    frame = render_frame(square_store, [track], [1], 100, 100)

    assert len(frame) == 4
    assert frame.bounds.as_tuple() == (0.0, 10.0, 0.0, 10.0)
    assert list(frame.lit) == [True, False, False, False]
    assert (frame.xs[0], frame.ys[0]) == (0.0, 100.0)


def test_render_frame_empty_store():
    frame = render_frame(CoordinateStore([]), [], [], 100, 100)
    assert len(frame) == 0
    assert frame.bounds is None
