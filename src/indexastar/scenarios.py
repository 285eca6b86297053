from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
import math
import random
from typing import Any, Generic, cast

from .core.types import Graph, HeuristicFn, N as Node
from .grid import (
    Grid,
    TerrainGrid,
    admissible_terrain_octile,
    generate_maze,
    generate_terrain,
    manhattan,
    octile,
)


@dataclass
class Scenario:
    name: str
    start: Any
    goal: Any
    graph: Graph[Any]
    h: HeuristicFn[Any]
    meta: dict[str, Any]


@dataclass
class AdjacencyGraph(Generic[Node]):
    """Weighted graph stored as ``{u: {v: cost}}``."""

    edges: dict[Node, dict[Node, float]] = field(default_factory=dict)

    def add_edge(self, u: Node, v: Node, cost: float, *, both_ways: bool = True) -> None:
        self.edges.setdefault(u, {})[v] = float(cost)
        self.edges.setdefault(v, {})
        if both_ways:
            self.edges[v][u] = float(cost)

    def neighbors(self, node: Node) -> list[Node]:
        return list(self.edges.get(node, ()))

    def cost(self, from_node: Node, to_node: Node) -> float:
        return self.edges[from_node][to_node]


# Partial wall of the demo grid: a hook around (2..4, 0..1), open only to the left.
DEMO_WALLS: frozenset[tuple[int, int]] = frozenset(
    {(1, 1), (1, 2), (2, 2), (3, 2), (4, 2), (5, 2), (5, 1), (5, 0)}
)


def demo_grid() -> Grid:
    return Grid(10, 10, walls=set(DEMO_WALLS))


def scenario_wall_demo(goal: tuple[int, int] = (6, 0)) -> Scenario:
    return Scenario(
        name=f"wall_demo_goal{goal[0]}_{goal[1]}",
        start=(0, 0),
        goal=goal,
        graph=demo_grid(),
        h=cast(HeuristicFn[Any], manhattan),
        meta={"kind": "wall_demo"},
    )


def make_grid_obstacles(
    width: int, height: int, density: float, seed: int = 0, diagonal: bool = False
) -> Grid:
    rng = random.Random(seed)
    walls = set()
    for x in range(width):
        for y in range(height):
            if rng.random() < density:
                walls.add((x, y))
    for p in [(0, 0), (width - 1, height - 1)]:
        walls.discard(p)
    return Grid(width, height, walls=walls, diagonal=diagonal)


def scenario_grid_4(width: int, height: int, density: float, seed: int = 0) -> Scenario:
    grid = make_grid_obstacles(width, height, density, seed)
    return Scenario(
        name=f"grid4_{width}x{height}_d{density}_s{seed}",
        start=(0, 0),
        goal=(width - 1, height - 1),
        graph=grid,
        h=cast(HeuristicFn[Any], manhattan),
        meta={"kind": "grid4", "density": density, "seed": seed},
    )


def scenario_grid_8(width: int, height: int, density: float, seed: int = 0) -> Scenario:
    grid = make_grid_obstacles(width, height, density, seed, diagonal=True)
    return Scenario(
        name=f"grid8_{width}x{height}_d{density}_s{seed}",
        start=(0, 0),
        goal=(width - 1, height - 1),
        graph=grid,
        h=cast(HeuristicFn[Any], octile),
        meta={"kind": "grid8", "density": density, "seed": seed},
    )


def scenario_terrain8(width: int, height: int, seed: int = 0) -> Scenario:
    tg = TerrainGrid(width, height, diagonal=True, terrain=generate_terrain(width, height, seed))
    return Scenario(
        name=f"terrain8_{width}x{height}_s{seed}",
        start=(0, 0),
        goal=(width - 1, height - 1),
        graph=tg,
        h=cast(HeuristicFn[Any], admissible_terrain_octile(tg)),
        meta={"kind": "terrain8", "seed": seed},
    )


def scenario_maze4(width: int, height: int, seed: int = 0) -> Scenario:
    return Scenario(
        name=f"maze4_{width}x{height}_s{seed}",
        start=(0, 0),
        goal=(width - 1, height - 1),
        graph=generate_maze(width, height, seed=seed),
        h=cast(HeuristicFn[Any], manhattan),
        meta={"kind": "maze4", "seed": seed},
    )


def scenario_geometric(n: int, k: int, seed: int = 0) -> Scenario:
    """Random points in the unit square, each linked to its k nearest neighbours."""
    rng = random.Random(seed)
    pts = [(rng.random(), rng.random()) for _ in range(n)]

    def dist(i: int, j: int) -> float:
        (x1, y1), (x2, y2) = pts[i], pts[j]
        return math.hypot(x1 - x2, y1 - y2)

    graph: AdjacencyGraph[int] = AdjacencyGraph()
    for i in range(n):
        for d, j in sorted((dist(i, j), j) for j in range(n) if j != i)[:k]:
            graph.add_edge(i, j, d)

    def h(i: int, goal: int) -> float:
        return dist(i, goal)

    return Scenario(
        name=f"geom_n{n}_k{k}_s{seed}",
        start=0,
        goal=n - 1,
        graph=cast(Graph[Any], graph),
        h=cast(HeuristicFn[Any], h),
        meta={"kind": "geom", "n": n, "k": k, "seed": seed},
    )


# 8-puzzle
GOAL_8: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 0)
MOVES_8 = {
    0: [1, 3],
    1: [0, 2, 4],
    2: [1, 5],
    3: [0, 4, 6],
    4: [1, 3, 5, 7],
    5: [2, 4, 8],
    6: [3, 7],
    7: [4, 6, 8],
    8: [5, 7],
}


def _slide(state: tuple[int, ...], z: int, nz: int) -> tuple[int, ...]:
    lst = list(state)
    lst[z], lst[nz] = lst[nz], lst[z]
    return tuple(lst)


class PuzzleGraph:
    """8-puzzle boards as nodes; sliding a tile into the blank costs 1."""

    def neighbors(self, state: tuple[int, ...]) -> list[tuple[int, ...]]:
        z = state.index(0)
        return [_slide(state, z, nz) for nz in MOVES_8[z]]

    def cost(self, from_node: Hashable, to_node: Hashable) -> float:
        return 1.0


def puzzle_h_manhattan(state: tuple[int, ...], goal: tuple[int, ...]) -> float:
    where = {val: idx for idx, val in enumerate(goal)}
    dist = 0
    for idx, val in enumerate(state):
        if val == 0:
            continue
        gi = where[val]
        dist += abs(idx % 3 - gi % 3) + abs(idx // 3 - gi // 3)
    return float(dist)


def scramble_puzzle(steps: int, seed: int = 0) -> tuple[int, ...]:
    rng = random.Random(seed)
    s: tuple[int, ...] = GOAL_8
    for _ in range(steps):
        z = s.index(0)
        s = _slide(s, z, rng.choice(MOVES_8[z]))
    return s


def scenario_puzzle(steps: int, seed: int = 0) -> Scenario:
    return Scenario(
        name=f"8p_{steps}_s{seed}",
        start=scramble_puzzle(steps, seed),
        goal=GOAL_8,
        graph=cast(Graph[Any], PuzzleGraph()),
        h=cast(HeuristicFn[Any], puzzle_h_manhattan),
        meta={"kind": "8p", "steps": steps, "seed": seed},
    )


def default_suite(seed: int = 0) -> list[Scenario]:
    return [
        scenario_wall_demo(),
        scenario_grid_4(50, 50, density=0.15, seed=seed),
        scenario_grid_8(60, 60, density=0.20, seed=seed),
        scenario_terrain8(60, 60, seed=seed),
        scenario_maze4(51, 51, seed=seed),
        scenario_geometric(150, k=8, seed=seed),
        scenario_puzzle(steps=25, seed=seed),
    ]
