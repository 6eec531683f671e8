"""
Marker layout and height animation for carved cells.

Each open cell becomes a marker laid out on the x/z plane, scaled to the cell
size. ``animate_markers`` bobs them on a sine wave; whoever owns the frame
loop passes in the current time.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List

from .errors import InvalidArgumentError
from .grid import Grid

DEFAULT_DISTANCE_RANGE = 6.0


@dataclass
class Marker:
    row: int
    col: int
    x: float
    y: float
    z: float
    scale: float

    def position(self):
        return (self.x, self.y, self.z)


def check_distance_range(distance_range) -> float:
    # NaN fails every comparison, so test for > 0 rather than <= 0
    if isinstance(distance_range, bool) or not isinstance(distance_range, (int, float)) \
            or not (distance_range > 0) or not math.isfinite(distance_range):
        raise InvalidArgumentError(f"distance_range must be a finite number > 0, got {distance_range!r}")
    return float(distance_range)


def cell_step(dimension: int, distance_range: float) -> float:
    return check_distance_range(distance_range) / dimension


def layout_markers(grid: Grid, distance_range: float = DEFAULT_DISTANCE_RANGE) -> List[Marker]:
    step = cell_step(grid.dimension, distance_range)
    markers: List[Marker] = []
    for row, col in grid.open_cells():
        markers.append(Marker(
            row=row,
            col=col,
            x=(row + 0.5) * step - 1.0,
            y=0.0,
            z=(col + 0.5) * step - 1.0,
            scale=step,
        ))
    return markers


def animate_markers(markers: Iterable[Marker], time: float) -> List[Marker]:
    """Set every marker's height for ``time``; updates in place."""
    out = list(markers)
    for m in out:
        m.y = math.sin(math.pi * (m.z + time))
    return out
