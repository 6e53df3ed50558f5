# tests/test_session.py
from datetime import datetime, timezone

import pytest

from replay import MatchPolicy, PlaybackMode, RaceSession, Sample, Track, assign_colors
from replay.engine import UNLIT
from replay.session import format_clock

from conftest import make_track

RED, GREEN = "red", "green"


@pytest.fixture
def scenario(square_store):
    a = make_track("a", [(0, 0), (10, 0)], delay=50)
    b = make_track("b", [(10, 10)], delay=50)
    return RaceSession(square_store, [a, b], [RED, GREEN])


def colors_of(session, frame):
    return [session.colors[o] if o != UNLIT else None for o in frame.owners]


def test_two_car_scenario(scenario):
    scenario.start(0.0)
    assert scenario.tick(0.05)
    assert scenario.tick(0.2)
    assert scenario.current_index == 2

    frame = scenario.frame(100, 100)
    # points: (0,0) (10,0) (0,10) (10,10)
    assert colors_of(scenario, frame) == [RED, RED, None, GREEN]


def test_lockstep_uses_reference_track_delays(square_store):
    a = make_track("a", [(0, 0), (10, 0)], delay=1000)
    b = make_track("b", [(10, 10), (0, 10)], delay=10)
    session = RaceSession(square_store, [a, b], [RED, GREEN])

    session.start(0.0)
    assert not session.tick(0.5)
    assert session.cursors() == [0, 0]
    assert session.tick(1.0)
    assert session.cursors() == [1, 1]


def test_independent_mode_uses_own_delays(square_store):
    a = make_track("a", [(0, 0), (10, 0)], delay=1000)
    b = make_track("b", [(10, 10), (0, 10)], delay=10)
    session = RaceSession(square_store, [a, b], [RED, GREEN], mode=PlaybackMode.INDEPENDENT)

    session.start(0.0)
    assert session.tick(0.5)
    assert session.cursors() == [0, 1]
    assert session.current_index == 0

    frame = session.frame(100, 100)
    assert colors_of(session, frame) == [None, None, None, GREEN]


def test_current_policy(square_store):
    a = make_track("a", [(0, 0), (10, 0)], delay=0)
    session = RaceSession(square_store, [a], [RED], match_policy=MatchPolicy.CURRENT)
    session.start(0.0)
    session.tick(0.0)
    session.tick(0.0)

    assert colors_of(session, session.frame(10, 10)) == [None, RED, None, None]


def test_start_and_stop_reset(scenario):
    scenario.start(0.0)
    scenario.tick(0.05)
    assert scenario.current_index == 1

    scenario.start(1.0)
    assert scenario.current_index == 0
    assert scenario.started

    scenario.tick(1.1)
    scenario.stop()
    assert scenario.current_index == 0
    assert not scenario.started
    assert scenario.elapsed(5.0) == 0.0


def test_stopped_session_shows_nothing(scenario):
    assert not scenario.tick(10.0)
    frame = scenario.frame(100, 100)
    assert not frame.lit.any()


def test_end_of_data_freezes(scenario):
    scenario.start(0.0)
    scenario.tick(0.05)
    scenario.tick(0.2)
    before = list(scenario.frame(100, 100).owners)

    assert not scenario.tick(1.0)
    assert not scenario.tick(2.0)
    assert scenario.current_index == 2
    assert scenario.started
    assert list(scenario.frame(100, 100).owners) == before


def test_readout(square_store):
    ts = datetime(2023, 9, 17, 13, 4, 5, 678900, tzinfo=timezone.utc)
    track = Track("a", [Sample(ts, 0.0, 0.0, 0)])
    session = RaceSession(square_store, [track], [RED])

    assert session.readout() == "13:04:05.678"
    session.start(0.0)
    session.tick(0.0)
    assert session.readout() is None


def test_format_clock_pads_millis():
    assert format_clock(datetime(2023, 1, 1, 1, 2, 3, 4000)) == "01:02:03.004"


def test_no_tracks(square_store):
    session = RaceSession(square_store, [], [])
    session.start(0.0)
    assert not session.tick(1.0)
    assert session.readout() is None
    assert session.cursors() == []


def test_too_few_colors(square_store):
    with pytest.raises(ValueError):
        RaceSession(square_store, [make_track("a", [(0, 0)])], [])


def test_assign_colors_wraps():
    assert assign_colors(5, ["r", "g"]) == ["r", "g", "r", "g", "r"]
    assert assign_colors(0, []) == []
    with pytest.raises(ValueError):
        assign_colors(1, [])


@pytest.mark.parametrize("mode", list(PlaybackMode))
def test_started_flag_without_tracks(square_store, mode):
    session = RaceSession(square_store, [], [], mode=mode)
    assert not session.started

    session.start(0.0)
    assert session.started
    assert session.current_index == 0

    session.stop()
    assert not session.started
