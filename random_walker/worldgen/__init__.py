"""
random_walker.worldgen
----------------------

Map generation package: the random-walk carver, the grid it fills in, and
the marker layout used to display carved cells.

Public API:
    from random_walker.worldgen import carve, layout_markers, animate_markers
"""

from .carver import carve
from .errors import (
    GenerationFailedError,
    InvalidArgumentError,
    RandomWalkerError,
    WalkerStateError,
)
from .grid import Cell, Direction, Grid, Tunnel
from .markers import Marker, animate_markers, layout_markers
from .rng import RandomSource, make_rng
