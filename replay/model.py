# replay/model.py
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class FixedPoint:
    x: float           # x_led
    y: float           # y_led


@dataclass(frozen=True)
class Sample:
    timestamp: datetime    # UTC
    x: float
    y: float
    delay_to_next: int = 0  # ms before the next sample is due

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


class Track:
    """
    One car's recorded samples, index 0 = earliest.

    Read-only once built; ``get`` returns None instead of raising so the
    render loop can probe past the end.
    """

    def __init__(self, name: str, samples: Sequence[Sample]):
        self.name = name
        self._samples: Tuple[Sample, ...] = tuple(samples)
        self._xy = np.array([s.position for s in self._samples], dtype=np.float64).reshape(-1, 2)
        self._xy.setflags(write=False)

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples)

    def __getitem__(self, index: int) -> Sample:
        return self._samples[index]

    def get(self, index: int) -> Optional[Sample]:
        if 0 <= index < len(self._samples):
            return self._samples[index]
        return None

    @property
    def xy(self) -> np.ndarray:
        """Read-only (N, 2) array of sample positions."""
        return self._xy

    @property
    def delays(self) -> Tuple[int, ...]:
        return tuple(s.delay_to_next for s in self._samples)

    def __repr__(self) -> str:
        return f"Track({self.name!r}, {len(self._samples)} samples)"
