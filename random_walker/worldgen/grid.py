"""
Square wall/open grid used by the tunnel carver.

Cells are stored row-major in a flat list. The integer values follow the
classic random-walk map: 1 is a wall, 0 is a carved tunnel cell.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, Iterator, List, Optional, Tuple


class Cell(IntEnum):
    OPEN = 0
    WALL = 1


class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def drow(self) -> int:
        return self.value[0]

    @property
    def dcol(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.drow, -self.dcol))


# Fixed order so seeded runs pick the same directions every time.
DIRECTIONS: Tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


@dataclass
class Tunnel:
    start: Tuple[int, int]
    direction: Direction
    cells: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.cells)

    def to_dict(self) -> Dict:
        return {
            "start": list(self.start),
            "direction": self.direction.name.lower(),
            "length": self.length,
        }


class Grid:
    """Square map of walls with carved tunnels."""

    def __init__(self, dimension: int, fill: Cell = Cell.WALL) -> None:
        self.dimension = dimension
        self._cells: List[Cell] = [fill] * (dimension * dimension)
        self.start: Optional[Tuple[int, int]] = None
        self.tunnels: List[Tunnel] = []

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.dimension and 0 <= col < self.dimension

    def _index(self, row: int, col: int) -> int:
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) outside {self.dimension}x{self.dimension} grid")
        return row * self.dimension + col

    def get(self, row: int, col: int) -> Cell:
        return self._cells[self._index(row, col)]

    def is_open(self, row: int, col: int) -> bool:
        return self.get(row, col) is Cell.OPEN

    def open(self, row: int, col: int) -> None:
        self._cells[self._index(row, col)] = Cell.OPEN

    def open_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (row, col) of every open cell in row-major order."""
        D = self.dimension
        for idx, cell in enumerate(self._cells):
            if cell is Cell.OPEN:
                yield divmod(idx, D)

    def count_open(self) -> int:
        return sum(1 for c in self._cells if c is Cell.OPEN)

    def rows(self) -> List[List[int]]:
        D = self.dimension
        return [[int(c) for c in self._cells[r * D:(r + 1) * D]] for r in range(D)]

    def to_dict(self) -> Dict:
        return {
            "dimension": self.dimension,
            "start": list(self.start) if self.start is not None else None,
            "open_cells": self.count_open(),
            "tunnels": [t.to_dict() for t in self.tunnels],
            "map": self.rows(),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.dimension == other.dimension and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid(dimension={self.dimension}, open={self.count_open()})"
