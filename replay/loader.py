"""
CSV loaders for the LED layout and the recorded car tracks.

All failures are fatal: a missing file, a missing column or a single bad
row aborts the whole load with a LoadError. There is no per-row skip.
"""
from __future__ import annotations

import logging
import warnings
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Type

import numpy as np
import pandas as pd
from pydantic import BaseModel

from replay.engine import Bounds
from replay.errors import DegenerateBoundsError, LoadError
from replay.model import FixedPoint, Sample, Track
from replay.schema import (
    CoordinateRow,
    SampleRow,
    TimedSampleRow,
    decode_row,
    required_columns,
)

logger = logging.getLogger(__name__)

# Number of records echoed at DEBUG level after each track load
PREVIEW_ROWS = 5


def _read_records(path: Path, model: Type[BaseModel]) -> List[Dict[str, Any]]:
    """Read a CSV with a header row into raw string records."""
    if not path.is_file():
        raise LoadError(path, "file not found")

    try:
        # a row with more fields than the header must fail, not be
        # truncated or turned into an index column
        with warnings.catch_warnings():
            warnings.simplefilter("error", pd.errors.ParserWarning)
            df = pd.read_csv(
                path, dtype=str, keep_default_na=False, skipinitialspace=True, index_col=False,
            )
    except pd.errors.ParserWarning as e:
        raise LoadError(path, f"row does not match header: {e}") from e
    except pd.errors.EmptyDataError:
        raise LoadError(path, "file is empty (no header row)") from None
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
        raise LoadError(path, f"could not read CSV: {e}") from e

    df.columns = [str(c).strip() for c in df.columns]
    present = set(df.columns)
    for choices in required_columns(model):
        if not present.intersection(choices):
            raise LoadError(path, f"missing column '{choices[0]}'")

    return df.to_dict(orient="records")


def _decode_all(path: Path, model: Type[BaseModel], records: Iterable[Dict[str, Any]], first_row: int = 1):
    rows = []
    for row, record in enumerate(records, start=first_row):
        result = decode_row(model, record, row)
        if not result.ok:
            raise LoadError(path, str(result.error)) from result.error
        rows.append(result.value)
    return rows


class CoordinateStore:
    """
    The fixed LED positions of the layout, loaded once and never changed.
    """

    def __init__(self, points: Sequence[FixedPoint]):
        self._points: Tuple[FixedPoint, ...] = tuple(points)
        self._xy = np.array([(p.x, p.y) for p in self._points], dtype=np.float64).reshape(-1, 2)
        self._xy.setflags(write=False)

    @classmethod
    def load(cls, path) -> "CoordinateStore":
        path = Path(path)
        records = _read_records(path, CoordinateRow)
        rows = _decode_all(path, CoordinateRow, records)
        store = cls(FixedPoint(r.x_led, r.y_led) for r in rows)
        logger.info("Loaded %d LED coordinates from %s", len(store), path.name)
        return store

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    @property
    def xy(self) -> np.ndarray:
        """Read-only (N, 2) array of the LED coordinates."""
        return self._xy

    def bounds(self) -> Bounds:
        """Min/max over all points; recomputed on every call."""
        if not self._points:
            raise DegenerateBoundsError("no LED coordinates loaded")
        return Bounds.of(self._xy)


def load_track(path, skip_first_row: bool = False, require_time_delta: bool = False, name: Optional[str] = None) -> Track:
    """
    Load one car's samples.

    Args:
        path: CSV with ``date,x_led,y_led[,time_delta]`` columns
        skip_first_row: Drop the first data record unread (the per-driver
            exports start with a marker row)
        require_time_delta: Every row must carry ``time_delta``
        name: Track name, defaults to the file stem
    """
    path = Path(path)
    model = TimedSampleRow if require_time_delta else SampleRow
    records = _read_records(path, model)

    first_row = 1
    if skip_first_row and records:
        records = records[1:]
        first_row = 2

    rows = _decode_all(path, model, records, first_row=first_row)
    track = Track(
        name or path.stem,
        [Sample(r.date, r.x_led, r.y_led, r.delay_ms) for r in rows],
    )
    logger.info("Loaded %s: %d records", track.name, len(track))
    for sample in list(track)[:PREVIEW_ROWS]:
        logger.debug("  %s", sample)
    return track


def load_tracks(paths: Iterable, skip_first_row: bool = False, require_time_delta: bool = False) -> List[Track]:
    """Load one track per file, in the given order; the first failure aborts."""
    return [
        load_track(p, skip_first_row=skip_first_row, require_time_delta=require_time_delta)
        for p in paths
    ]


def load_combined(path) -> List[Track]:
    """Single-file variant: one track, ``time_delta`` mandatory, nothing skipped."""
    return [load_track(path, skip_first_row=False, require_time_delta=True)]
