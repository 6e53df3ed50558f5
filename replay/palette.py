# replay/palette.py
from typing import List, Sequence, TypeVar

C = TypeVar("C")


def assign_colors(n_tracks: int, palette: Sequence[C]) -> List[C]:
    """
    Index-aligned color per track, fixed for the whole run.

    Wraps around the palette when there are more tracks than colors.
    """
    if n_tracks and not palette:
        raise ValueError("palette is empty")
    return [palette[i % len(palette)] for i in range(n_tracks)]
