"""Single-source shortest paths over an adjacency matrix."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ShortestPaths:
    """Distances and predecessors found from one start node.

    Unreachable nodes have distance ``math.inf`` and predecessor None.
    """

    start: int
    distances: tuple[float, ...]
    predecessors: tuple[int | None, ...]

    def path(self, node: int) -> list[int]:
        """Return the nodes on a shortest path from ``start`` to ``node``."""
        if not 0 <= node < len(self.distances):
            raise IndexError(f"node {node} is not in the graph")
        if self.distances[node] == math.inf:
            raise ValueError(f"node {node} is unreachable from {self.start}")
        route = [node]
        while node != self.start:
            previous = self.predecessors[node]
            assert previous is not None
            node = previous
            route.append(node)
        route.reverse()
        return route


def dijkstra(matrix: Iterable[Sequence[float]], start: int) -> ShortestPaths:
    """Run Dijkstra's algorithm; a zero entry in ``matrix`` means no edge."""
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise IndexError(f"start node {start} is not in the graph")

    cost = [[weight if weight != 0 else math.inf for weight in row] for row in rows]
    distances: list[float] = list(cost[start])
    distances[start] = 0
    predecessors: list[int | None] = [
        start if distance != math.inf else None for distance in distances
    ]
    predecessors[start] = None
    visited = {start}

    while len(visited) < size:
        candidates = [
            (distance, node)
            for node, distance in enumerate(distances)
            if node not in visited and distance != math.inf
        ]
        if not candidates:
            break
        nearest_distance, nearest = min(candidates)
        visited.add(nearest)
        for node, weight in enumerate(cost[nearest]):
            if node not in visited and nearest_distance + weight < distances[node]:
                distances[node] = nearest_distance + weight
                predecessors[node] = nearest

    return ShortestPaths(start, tuple(distances), tuple(predecessors))