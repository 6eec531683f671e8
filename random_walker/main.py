# random_walker/main.py
import argparse
import json
import logging
import os
from typing import List, Optional

from colorama import init

from .console_utils import console_print
from .logging_config import setup_logging
from .map_generator import RandomWalker
from .ui import render_frame, render_map, render_summary
from .worldgen.config import load_walker_cfg
from .worldgen.errors import RandomWalkerError
from .worldgen.paths import ensure_dir

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="random-walker",
        description="Carve a tunnel map with a random walk and print it.",
    )
    parser.add_argument("--config", help="path to a walker.json config file")
    parser.add_argument("--dimensions", type=int, help="width and height of the map")
    parser.add_argument("--tunnels", type=int, dest="max_tunnels", help="number of tunnels to carve")
    parser.add_argument("--max-length", type=int, help="longest tunnel allowed")
    parser.add_argument("--seed", type=int, help="seed for reproducible maps")
    parser.add_argument("--max-attempts", type=int,
                        help="give up after this many stuck tunnels in a row")
    parser.add_argument("--distance-range", type=float, help="world size the markers are spread over")
    parser.add_argument("--dump-json", metavar="PATH", help="also write the map as JSON")
    parser.add_argument("--frames", type=int, default=0, help="print this many animation frames")
    parser.add_argument("--time-step", type=float, default=0.25, help="seconds between frames")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--no-log-file", action="store_true", help="log to the console only")
    parser.add_argument("--no-color", action="store_true", help="plain ASCII output")
    return parser


def _merge_args(cfg: dict, args: argparse.Namespace) -> dict:
    for key in ("dimensions", "max_tunnels", "max_length", "seed", "max_attempts", "distance_range"):
        value = getattr(args, key)
        if value is not None:
            cfg[key] = value
    return cfg


def _dump_json(path: str, walker: RandomWalker) -> None:
    ensure_dir(os.path.dirname(os.path.abspath(path)))
    data = walker.grid.to_dict()
    data["seed"] = walker.seed
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    logger.info(f"Wrote {path}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), log_to_file=not args.no_log_file)
    color = not args.no_color
    if color:
        init()  # colorama init

    try:
        cfg = _merge_args(load_walker_cfg(args.config), args)
        walker = RandomWalker.from_config(cfg)
        grid = walker.generate()
    except RandomWalkerError as e:
        logger.error(f"Map generation failed: {e}")
        console_print(f"Error: {e}", color="red", enabled=color)
        return 1

    print(render_map(grid, color=color))
    console_print(render_summary(grid), color="cyan", enabled=color)

    if args.dump_json:
        try:
            _dump_json(args.dump_json, walker)
        except OSError as e:
            logger.error(f"Failed to write {args.dump_json}: {e}")
            console_print(f"Error: could not write {args.dump_json}: {e}", color="red", enabled=color)
            return 1
        console_print(f"Wrote {args.dump_json}", color="yellow", enabled=color)

    for i in range(max(0, args.frames)):
        t = i * args.time_step
        print(render_frame(walker.animate(t), t))

    return 0
