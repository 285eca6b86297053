from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Protocol, TypeVar

N = TypeVar("N", bound=Hashable)
_NodeContra_contra = TypeVar("_NodeContra_contra", bound=Hashable, contravariant=True)


class Graph(Protocol[N]):
    """Query surface the search consumes. Costs must be non-negative."""

    def neighbors(self, node: N) -> Sequence[N]: ...

    def cost(self, from_node: N, to_node: N) -> float: ...


class HeuristicFn(Protocol[_NodeContra_contra]):
    def __call__(self, node: _NodeContra_contra, goal: _NodeContra_contra) -> float: ...
