"""
random_walker
-------------

Random-walk ("drunkard's walk") tunnel map generator.

    from random_walker import RandomWalker
    grid = RandomWalker(dimensions=10, max_tunnels=8, seed=7).generate()
"""

from .map_generator import RandomWalker
from .worldgen import (
    Cell,
    Direction,
    GenerationFailedError,
    Grid,
    InvalidArgumentError,
    Marker,
    RandomWalkerError,
    WalkerStateError,
    carve,
)

__version__ = "0.1.0"
