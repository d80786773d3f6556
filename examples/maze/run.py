"""
Maze Demo

Load a JSON map, run the A* search and print the resulting moves.

Run: python examples/maze/run.py --map corridor --heuristic manhattan
"""

import argparse
import sys
from pathlib import Path

from gridsearch import GridSearch, MapLoader, build_heuristic, path_cells
from gridsearch.config import Config
from gridsearch.logging_utils import log_error, log_info


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="A* maze demo")
    parser.add_argument("--map", default="corridor", help="Map name (file stem in the maps dir)")
    parser.add_argument(
        "--maps-dir",
        type=Path,
        default=None,
        help="Directory holding map JSON files (defaults to GRIDSEARCH_MAPS_DIR)",
    )
    parser.add_argument(
        "--heuristic",
        default=None,
        help="Heuristic name; falls back to the map's preference, then GRIDSEARCH_HEURISTIC",
    )
    parser.add_argument("--max-steps", type=int, default=None, help="Expansion budget")
    parser.add_argument("--list", action="store_true", help="List available maps and exit")
    return parser.parse_args()


def main(args: argparse.Namespace) -> int:
    Config.validate()
    loader = MapLoader(maps_dir=args.maps_dir)

    if args.list:
        for name in loader.list_maps():
            print(name)
        return 0

    definition = loader.load(args.map)
    if definition.start is None or definition.goal is None:
        log_error(f"Map '{args.map}' does not define both a start and a goal")
        return 2

    heuristic_name = args.heuristic or definition.heuristic or Config.HEURISTIC
    log_info(Config.display())
    log_info(f"Map: {definition.name} ({heuristic_name})")

    grid = definition.to_grid()
    finder = GridSearch(
        grid,
        definition.start,
        definition.goal,
        build_heuristic(heuristic_name, definition.goal),
        max_steps=args.max_steps,
        verbose=True,
    )
    edges = finder.search()

    if edges is None:
        return 1

    for edge in edges:
        print(f"  {edge.from_cell} → {edge.to_cell}")
    print(" → ".join(str(cell) for cell in path_cells(edges, definition.start)))
    print(finder.stats.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main(parse_args()))
