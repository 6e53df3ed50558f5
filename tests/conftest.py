# tests/conftest.py
from datetime import datetime, timedelta, timezone

import pytest

from replay import CoordinateStore, FixedPoint, Sample, Track

T0 = datetime(2023, 9, 17, 12, 0, 0, tzinfo=timezone.utc)


def make_track(name, positions, delay=50):
    """Track with one sample per position, 1 s apart."""
    return Track(name, [
        Sample(T0 + timedelta(seconds=i), float(x), float(y), delay)
        for i, (x, y) in enumerate(positions)
    ])


@pytest.fixture
def write_csv(tmp_path):
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def square_store():
    return CoordinateStore([FixedPoint(0, 0), FixedPoint(10, 0), FixedPoint(0, 10), FixedPoint(10, 10)])
