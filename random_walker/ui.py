import logging
from typing import List

from colorama import Fore, Style

from random_walker.worldgen.grid import Grid
from random_walker.worldgen.markers import Marker

logger = logging.getLogger(__name__)

WALL_CHAR = "#"
OPEN_CHAR = "."
START_CHAR = "@"


def _paint(ch: str, color: str, enabled: bool) -> str:
    return f"{color}{ch}{Style.RESET_ALL}" if enabled else ch


def render_map(grid: Grid, color: bool = True) -> str:
    """ASCII picture of the grid, one line per row."""
    lines = []
    for r in range(grid.dimension):
        out = []
        for c in range(grid.dimension):
            if grid.start == (r, c):
                out.append(_paint(START_CHAR, Fore.YELLOW, color))
            elif grid.is_open(r, c):
                out.append(_paint(OPEN_CHAR, Fore.GREEN, color))
            else:
                out.append(_paint(WALL_CHAR, Fore.WHITE + Style.DIM, color))
        lines.append("".join(out))
    return "\n".join(lines)


def render_summary(grid: Grid) -> str:
    parts = [f"{t.direction.name.lower()} x{t.length} from {t.start}" for t in grid.tunnels]
    return (f"{grid.dimension}x{grid.dimension} map, start {grid.start}, "
            f"{grid.count_open()} open cells\n"
            f"tunnels: {'; '.join(parts) if parts else 'none'}")


def render_frame(markers: List[Marker], time: float) -> str:
    """One line per marker: cell and current height."""
    lines = [f"t={time:.2f}"]
    for m in markers:
        x, y, z = m.position()
        lines.append(f"  ({m.row},{m.col}) x={x:.2f} y={y:+.3f} z={z:.2f}")
    return "\n".join(lines)
