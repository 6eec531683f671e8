"""
Random-walk tunnel carving.

Starts somewhere on a map full of walls and digs straight tunnels of random
length, turning 90 degrees between tunnels, until the tunnel budget is
spent. A tunnel that hits the map edge just stops early; one that cannot
move at all does not count and the walker tries another direction.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import GenerationFailedError, InvalidArgumentError
from .grid import DIRECTIONS, Direction, Grid, Tunnel
from .rng import RandomSource

logger = logging.getLogger(__name__)

# Both the start cell and tunnel lengths are drawn from [0, 0.9) of the range.
SPREAD = 0.9
DEFAULT_MAX_ATTEMPTS = 1000


@dataclass
class WalkState:
    row: int
    col: int
    tunnels_left: int
    max_length: int
    last_direction: Optional[Direction] = None


def _require_positive_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be > 0, got {value}")
    return value


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))


def pick_start(dimension: int, rng: RandomSource) -> Tuple[int, int]:
    """Random starting cell, clamped into the grid."""
    row = round(rng.random() * SPREAD * dimension)
    col = round(rng.random() * SPREAD * dimension)
    return _clamp(row, 0, dimension - 1), _clamp(col, 0, dimension - 1)


def allowed_directions(last: Optional[Direction]) -> List[Direction]:
    """Directions perpendicular to ``last``, or all four if there is none."""
    if last is None:
        return list(DIRECTIONS)
    return [d for d in DIRECTIONS if d is not last and d is not last.opposite]


def pick_length(max_length: int, rng: RandomSource) -> int:
    length = math.ceil(rng.random() * SPREAD * max_length)
    return _clamp(length, 1, max_length)


def _dig(grid: Grid, state: WalkState, direction: Direction, length: int) -> Tunnel:
    tunnel = Tunnel(start=(state.row, state.col), direction=direction)
    for _ in range(length):
        nr, nc = state.row + direction.drow, state.col + direction.dcol
        if not grid.in_bounds(nr, nc):
            break
        grid.open(state.row, state.col)
        tunnel.cells.append((state.row, state.col))
        state.row, state.col = nr, nc
    return tunnel


def carve(dimension: int,
          max_tunnels: int,
          max_length: int,
          rng: RandomSource,
          max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> Grid:
    """
    Carve ``max_tunnels`` tunnels into a ``dimension`` x ``dimension`` grid.

    Raises InvalidArgumentError for non-positive parameters and
    GenerationFailedError if ``max_attempts`` tunnels in a row make no
    progress (e.g. a 1x1 grid, where every move leaves the map).
    """
    _require_positive_int("dimension", dimension)
    _require_positive_int("max_tunnels", max_tunnels)
    _require_positive_int("max_length", max_length)
    _require_positive_int("max_attempts", max_attempts)

    grid = Grid(dimension)
    row, col = pick_start(dimension, rng)
    grid.start = (row, col)
    state = WalkState(row=row, col=col, tunnels_left=max_tunnels, max_length=max_length)
    logger.debug(f"Carving {dimension}x{dimension} map from {grid.start}, "
                 f"{max_tunnels} tunnels, max length {max_length}")

    stalled = 0
    while state.tunnels_left > 0:
        direction = rng.choice(allowed_directions(state.last_direction))
        length = pick_length(state.max_length, rng)
        tunnel = _dig(grid, state, direction, length)

        if tunnel.length == 0:
            stalled += 1
            if stalled >= max_attempts:
                logger.error(f"Walker stuck at ({state.row}, {state.col}) after "
                             f"{stalled} attempts with {state.tunnels_left} tunnels left")
                raise GenerationFailedError(
                    f"no progress after {stalled} attempts at ({state.row}, {state.col}) "
                    f"on a {dimension}x{dimension} map"
                )
            continue

        stalled = 0
        grid.tunnels.append(tunnel)
        state.last_direction = direction
        state.tunnels_left -= 1

    logger.debug(f"Carved {len(grid.tunnels)} tunnels, {grid.count_open()} open cells")
    return grid
