import argparse
import logging
from typing import Any, cast

from indexastar.astar import NoPathFound, SearchParams, search, zero_heuristic
from indexastar.core.types import HeuristicFn
from indexastar.grid import manhattan, render_ascii
from indexastar.logging import get_logger
from indexastar.scenarios import demo_grid

HEURISTICS: dict[str, HeuristicFn[Any]] = {
    "manhattan": cast(HeuristicFn[Any], manhattan),
    "zero": cast(HeuristicFn[Any], zero_heuristic),
}


def parse_cell(text: str) -> tuple[int, int]:
    try:
        x, y = (int(v) for v in text.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {text!r}") from exc
    return x, y


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="A* on the 10x10 demo grid with a partial wall")
    p.add_argument("--goal", type=parse_cell, default=(6, 0))
    p.add_argument("--unreachable", type=parse_cell, default=(1, 1))
    p.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    p.add_argument("--log_every", type=int, default=None)
    p.add_argument("--verbose", action="store_true")
    p.add_argument("--json_logs", action="store_true")
    args = p.parse_args(argv)

    logger = get_logger(
        "indexastar.demo", level=logging.DEBUG if args.verbose else logging.INFO, json=args.json_logs
    )
    grid = demo_grid()
    start = (0, 0)
    h = HEURISTICS[args.heuristic]
    params = SearchParams(log_every=args.log_every)

    print(f"Finding path from {start} to {args.goal}")
    status = 0
    try:
        path, cost = search(start, args.goal, grid, h, params=params, logger=logger)
    except NoPathFound as exc:
        print(f"Error finding path: {exc}")
        status = 1
    else:
        print(f"Path found with cost {cost:.2f}:")
        for i, (x, y) in enumerate(path):
            print(f" {i}: ({x}, {y})")
        print("\nGrid Visualization:")
        print(render_ascii(grid, path, start, args.goal))

    print("\nTrying a case with no possible path:")
    try:
        search(start, args.unreachable, grid, h, params=params, logger=logger)
    except NoPathFound as exc:
        print(f"Correctly failed: {exc}")
    else:
        print("Error: Found a path where none should exist.")
        status = 1
    return status


if __name__ == "__main__":
    raise SystemExit(main())
