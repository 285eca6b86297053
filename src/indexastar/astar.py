from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
import math
import time
from typing import Any, Generic

from .core.types import Graph, HeuristicFn, N as Node
from .logging import get_logger as _get_logger
from .pqueue import IndexedPriorityQueue

CLOSED_REL_TOL = 1e-12
CLOSED_ABS_TOL = 1e-12


@dataclass
class SearchStats:
    expansions: int = 0
    generated: int = 0
    reopens: int = 0
    decreases: int = 0
    runtime_ms: float = 0.0


@dataclass
class SearchParams:
    max_expansions: int | None = None
    max_runtime_ms: float | None = None
    log_every: int | None = None
    should_stop: Callable[[], bool] | None = None

    def __post_init__(self) -> None:
        if self.max_expansions is not None and self.max_expansions < 1:
            raise ValueError("max_expansions must be >= 1")
        if self.max_runtime_ms is not None and self.max_runtime_ms <= 0:
            raise ValueError("max_runtime_ms must be > 0")
        if self.log_every is not None and self.log_every < 1:
            raise ValueError("log_every must be >= 1")


class SearchError(Exception):
    """Base class for searches that end without a path."""


class NoPathFound(SearchError):
    """The open set ran dry before the goal was extracted."""

    def __init__(self, start: Any, goal: Any) -> None:
        super().__init__(f"no path found from {start!r} to {goal!r}")
        self.start = start
        self.goal = goal


class SearchLimitReached(SearchError):
    """A budget or a stop request ended the search before it finished."""

    def __init__(self, reason: str, stats: SearchStats) -> None:
        super().__init__(reason)
        self.reason = reason
        self.stats = stats


def zero_heuristic(_node: Hashable, _goal: Hashable) -> float:
    return 0.0


class AStarSearch(Generic[Node]):  # pylint: disable=too-many-instance-attributes
    """A* from ``start`` to ``goal`` over a caller-supplied graph.

    Nodes move Undiscovered -> Open -> Closed. With an admissible, consistent
    heuristic a closed node is final; with an inconsistent one an improved
    closed node is queued again and counted in ``stats.reopens``.

    Preconditions: edge costs are non-negative and the reachable part of the
    graph is finite. Neither is checked.
    """

    def __init__(
        self,
        start: Node,
        goal: Node,
        graph: Graph[Node],
        heuristic: HeuristicFn[Node],
        *,
        params: SearchParams | None = None,
        logger: Any | None = None,
    ) -> None:
        cfg = params or SearchParams()
        self.start = start
        self.goal = goal
        self.graph = graph
        self.h = heuristic
        self.max_expansions = cfg.max_expansions
        self.max_runtime_ms = cfg.max_runtime_ms
        self.log_every = cfg.log_every
        self.should_stop = cfg.should_stop
        self.logger = logger or _get_logger(__name__)
        self._reset()

    def _reset(self) -> None:
        self.g: dict[Node, float] = {}
        self.f: dict[Node, float] = {}
        self.came_from: dict[Node, Node] = {}
        self.open: IndexedPriorityQueue[Node] = IndexedPriorityQueue()
        self.closed: set[Node] = set()
        self.stats = SearchStats()

    def _reconstruct(self, current: Node) -> list[Node]:
        path = [current]
        while current in self.came_from:
            current = self.came_from[current]
            path.append(current)
        path.reverse()
        return path

    def _check_limits(self, t0: float) -> None:
        reason = None
        if self.max_expansions is not None and self.stats.expansions >= self.max_expansions:
            reason = "max_expansions reached"
        elif self.max_runtime_ms is not None:
            if (time.perf_counter() - t0) * 1000.0 > self.max_runtime_ms:
                reason = "max_runtime_ms reached"
        if reason is None and self.should_stop is not None and self.should_stop():
            reason = "stop requested"
        if reason is not None:
            self.logger.info(
                "%s; stopping search",
                reason,
                extra={"search": {"event": "limit", "reason": reason, "exp": self.stats.expansions}},
            )
            self.stats.runtime_ms = (time.perf_counter() - t0) * 1000.0
            raise SearchLimitReached(reason, self.stats)

    def run(self) -> tuple[list[Node], float]:
        """Return ``(path, cost)`` or raise :class:`NoPathFound`."""
        self._reset()
        t0 = time.perf_counter()
        try:
            return self._search(t0)
        finally:
            self.stats.runtime_ms = (time.perf_counter() - t0) * 1000.0

    def _search(self, t0: float) -> tuple[list[Node], float]:
        start, goal = self.start, self.goal
        self.g[start] = 0.0
        self.f[start] = float(self.h(start, goal))
        self.open.insert(start, self.f[start])

        while self.open:
            current, _ = self.open.extract_min()
            self.closed.add(current)
            if current == goal:
                path = self._reconstruct(current)
                fields = {"cost": self.g[current], "len": len(path), "exp": self.stats.expansions}
                self.logger.debug(
                    "goal reached: cost=%(cost)s, path_len=%(len)d, expansions=%(exp)d",
                    fields,
                    extra={"search": {"event": "goal", **fields}},
                )
                return path, self.g[current]

            self._check_limits(t0)
            self.stats.expansions += 1
            if self.log_every and (self.stats.expansions % self.log_every == 0):
                fields = {
                    "exp": self.stats.expansions,
                    "gen": self.stats.generated,
                    "open": len(self.open),
                }
                self.logger.info(
                    "expansions=%(exp)d, generated=%(gen)d, open=%(open)d",
                    fields,
                    extra={"search": {"event": "progress", **fields}},
                )

            g_cur = self.g[current]
            for nb in self.graph.neighbors(current):
                self.stats.generated += 1
                tentative = g_cur + float(self.graph.cost(current, nb))
                old_g = self.g.get(nb, math.inf)
                if tentative >= old_g:
                    continue
                # rounding noise from summing the same costs in another order
                if nb in self.closed and math.isclose(
                    tentative, old_g, rel_tol=CLOSED_REL_TOL, abs_tol=CLOSED_ABS_TOL
                ):
                    continue
                self.came_from[nb] = current
                self.g[nb] = tentative
                self.f[nb] = tentative + float(self.h(nb, goal))
                if nb in self.open:
                    self.open.decrease_priority(nb, self.f[nb])
                    self.stats.decreases += 1
                else:
                    if nb in self.closed:
                        self.closed.discard(nb)
                        self.stats.reopens += 1
                    self.open.insert(nb, self.f[nb])

        self.logger.debug(
            "open set exhausted after %(exp)d expansions",
            {"exp": self.stats.expansions},
            extra={"search": {"event": "no_path", "exp": self.stats.expansions}},
        )
        raise NoPathFound(start, goal)


def search(
    start: Node,
    goal: Node,
    graph: Graph[Node],
    heuristic: HeuristicFn[Node],
    *,
    params: SearchParams | None = None,
    logger: Any | None = None,
) -> tuple[list[Node], float]:
    """Lowest-cost path from ``start`` to ``goal`` and its cost.

    Raises :class:`NoPathFound` when the goal is unreachable.
    """
    return AStarSearch(start, goal, graph, heuristic, params=params, logger=logger).run()
