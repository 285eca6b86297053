from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
import math
import random

from .core.types import HeuristicFn

Cell = tuple[int, int]

_MOVES4: list[Cell] = [(1, 0), (-1, 0), (0, 1), (0, -1)]
_MOVES8: list[Cell] = _MOVES4 + [(1, 1), (1, -1), (-1, 1), (-1, -1)]


@dataclass
class Grid:
    width: int
    height: int
    walls: set[Cell] = field(default_factory=set)
    step: float = 1.0
    diagonal: bool = False

    def add_obstacle(self, x: int, y: int) -> None:
        self.walls.add((x, y))

    def in_bounds(self, p: Cell) -> bool:
        x, y = p
        return 0 <= x < self.width and 0 <= y < self.height

    def passable(self, p: Cell) -> bool:
        return p not in self.walls

    def neighbors(self, p: Cell) -> list[Cell]:
        x, y = p
        out = []
        for dx, dy in _MOVES8 if self.diagonal else _MOVES4:
            q = (x + dx, y + dy)
            if self.in_bounds(q) and self.passable(q):
                out.append(q)
        return out

    def cost(self, a: Cell, b: Cell) -> float:
        straight = a[0] == b[0] or a[1] == b[1]
        return self.step if straight else math.sqrt(2) * self.step


@dataclass
class TerrainGrid(Grid):
    """Grid whose entry cost is scaled by a per-cell terrain factor."""

    terrain: dict[Cell, float] = field(default_factory=dict)

    def cost(self, a: Cell, b: Cell) -> float:
        return super().cost(a, b) * self.terrain.get(b, 1.0)


def manhattan(a: Cell, b: Cell) -> float:
    return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))


def octile(a: Cell, b: Cell) -> float:
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    dmin, dmax = min(dx, dy), max(dx, dy)
    return (dmax - dmin) + math.sqrt(2) * dmin


def admissible_terrain_octile(grid: TerrainGrid) -> HeuristicFn[Cell]:
    factors = list(grid.terrain.values())
    if len(grid.terrain) < grid.width * grid.height:
        factors.append(1.0)  # cells without an entry
    min_c = max(min(factors), 0.0)
    base = octile if grid.diagonal else manhattan

    def h(p: Cell, goal: Cell) -> float:
        return base(p, goal) * grid.step * min_c

    return h


def generate_terrain(
    width: int,
    height: int,
    seed: int = 0,
    kinds: Sequence[float] = (1.0, 1.5, 2.0, 3.0),
    weights: Sequence[float] = (0.55, 0.25, 0.15, 0.05),
) -> dict[Cell, float]:
    rng = random.Random(seed)
    terr = {}
    for x in range(width):
        for y in range(height):
            terr[(x, y)] = float(rng.choices(kinds, weights=weights, k=1)[0])
    return terr


def generate_maze(width: int, height: int, seed: int = 0) -> Grid:
    """Depth-first maze carved from a solid grid; (0, 0) and the far corner are open."""
    rng = random.Random(seed)
    walls = {(x, y) for x in range(width) for y in range(height)}
    start = (0, 0)
    walls.discard(start)
    stack = [start]
    visited = {start}

    def carve_options(x: int, y: int) -> Iterable[tuple[Cell, Cell]]:
        dirs = [(2, 0), (-2, 0), (0, 2), (0, -2)]
        rng.shuffle(dirs)
        for dx, dy in dirs:
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height:
                yield (nx, ny), (x + dx // 2, y + dy // 2)

    while stack:
        cx, cy = stack[-1]
        for cell, between in carve_options(cx, cy):
            if cell not in visited:
                visited.add(cell)
                stack.append(cell)
                walls.discard(between)
                walls.discard(cell)
                break
        else:
            stack.pop()
    walls.discard((width - 1, height - 1))
    return Grid(width, height, walls=walls)


def render_ascii(grid: Grid, path: Iterable[Cell], start: Cell, goal: Cell) -> str:
    on_path = set(path)
    border = "  +-" + "--" * grid.width + "-+"
    lines = ["   " + "".join(f"{x:2d}" for x in range(grid.width)), border]
    for y in range(grid.height):
        row = []
        for x in range(grid.width):
            p = (x, y)
            if p == start:
                row.append("S ")
            elif p == goal:
                row.append("G ")
            elif p in grid.walls:
                row.append("##")
            elif p in on_path:
                row.append("..")
            else:
                row.append("  ")
        lines.append(f"{y:2d}| " + "".join(row) + " |")
    lines.append(border)
    return "\n".join(lines)
