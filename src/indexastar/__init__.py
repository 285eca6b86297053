"""indexastar: A* search over caller-supplied graphs with an indexed decrease-key heap.

Public API:
- search / AStarSearch with SearchParams and SearchStats
- NoPathFound, SearchLimitReached (both SearchError)
- IndexedPriorityQueue
- Graph and HeuristicFn protocols
- Grid and scenarios as sample graphs
"""
from .astar import (
    AStarSearch,
    NoPathFound,
    SearchError,
    SearchLimitReached,
    SearchParams,
    SearchStats,
    search,
    zero_heuristic,
)
from .core.types import Graph, HeuristicFn
from .grid import Grid
from .pqueue import IndexedPriorityQueue
from . import scenarios

__all__ = [
    "AStarSearch", "NoPathFound", "SearchError", "SearchLimitReached", "SearchParams",
    "SearchStats", "search", "zero_heuristic", "Graph", "HeuristicFn", "Grid",
    "IndexedPriorityQueue", "scenarios",
]

__version__ = "0.1.0"
