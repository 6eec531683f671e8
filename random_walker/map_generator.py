# random_walker/map_generator.py
# -----------------------------------------------------------------------------
# Class-based front end for the random-walk map generator.
#
#     from random_walker.map_generator import RandomWalker
#     walker = RandomWalker(dimensions=8, max_tunnels=6, seed=42)
#     grid = walker.generate()
#     markers = walker.animate(t)     # call once per frame from your loop
#
# The walker owns its settings and the current map. It never runs a frame
# loop itself; the caller decides when to animate.
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .worldgen.carver import DEFAULT_MAX_ATTEMPTS, carve
from .worldgen.errors import WalkerStateError
from .worldgen.grid import Grid
from .worldgen.markers import (
    DEFAULT_DISTANCE_RANGE,
    Marker,
    animate_markers,
    cell_step,
    check_distance_range,
    layout_markers,
)
from .worldgen.rng import RandomSource, make_rng

logger = logging.getLogger(__name__)


class RandomWalker:
    """
    Generates a tunnel map and keeps the markers for its open cells.

    Pass ``rng`` to supply your own random source; otherwise one is built
    from ``seed`` (unseeded when ``seed`` is None). The same source is used
    for every ``generate()`` call, so repeated calls give different maps.
    """

    def __init__(
        self,
        dimensions: int = 5,
        max_tunnels: int = 3,
        max_length: int = 3,
        distance_range: float = DEFAULT_DISTANCE_RANGE,
        seed: Optional[int] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.dimensions = dimensions
        self.max_tunnels = max_tunnels
        self.max_length = max_length
        self.distance_range = distance_range
        self.seed = seed
        self.max_attempts = max_attempts
        self.rng: RandomSource = rng if rng is not None else make_rng(seed)
        self._grid: Optional[Grid] = None
        self._markers: List[Marker] = []

    @classmethod
    def from_config(cls, cfg: Dict[str, Any], rng: Optional[RandomSource] = None) -> "RandomWalker":
        return cls(
            dimensions=cfg["dimensions"],
            max_tunnels=cfg["max_tunnels"],
            max_length=cfg["max_length"],
            distance_range=cfg["distance_range"],
            seed=cfg.get("seed"),
            max_attempts=cfg["max_attempts"],
            rng=rng,
        )

    @property
    def grid(self) -> Optional[Grid]:
        return self._grid

    @property
    def markers(self) -> List[Marker]:
        return self._markers

    @property
    def step(self) -> float:
        return cell_step(self.dimensions, self.distance_range)

    def generate(self) -> Grid:
        """Carve a new map and lay out its markers, replacing any previous map."""
        check_distance_range(self.distance_range)
        grid = carve(
            self.dimensions,
            self.max_tunnels,
            self.max_length,
            self.rng,
            max_attempts=self.max_attempts,
        )
        self._markers = layout_markers(grid, self.distance_range)
        self._grid = grid
        logger.info(
            f"Generated {self.dimensions}x{self.dimensions} map: "
            f"{len(grid.tunnels)} tunnels, {len(self._markers)} open cells (seed={self.seed})"
        )
        return grid

    def animate(self, time: float) -> List[Marker]:
        if self._grid is None:
            raise WalkerStateError("animate() called before generate()")
        return animate_markers(self._markers, time)
