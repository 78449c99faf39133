"""Shortest-path routing and radius-bounded reachability over a WeightedGraph."""

import heapq
import logging
import math
from typing import Callable

from campus_map.core.graph import V, WeightedGraph
from campus_map.errors import InvalidEndpoint, Unreachable

logger = logging.getLogger(__name__)


def shortest_path(graph: WeightedGraph[V], start: V, target: V) -> list[V]:
    """Minimum-weight path from start to target (Dijkstra, binary heap).

    The frontier is ordered by (tentative distance, vertex index); the index
    is the vertex's insertion position in the graph, so among equal-cost
    paths the one through earlier-inserted vertices is returned.

    Returns:
        The vertices of the path, start and target included. ``[start]``
        when start equals target.

    Raises:
        Unreachable: if either endpoint is missing or no path exists.
    """
    if start not in graph:
        raise Unreachable(start, target, f"start {start!r} is not on the map")
    if target not in graph:
        raise Unreachable(start, target, f"target {target!r} is not on the map")

    src, dst = graph.index_of(start), graph.index_of(target)
    n = len(graph)
    dist = [math.inf] * n
    prev = [-1] * n
    visited = [False] * n
    dist[src] = 0.0
    frontier = [(0.0, src)]

    while frontier:
        d, i = heapq.heappop(frontier)
        if visited[i]:
            continue
        visited[i] = True
        if i == dst:
            break
        for j, w in graph.out_edges(i):
            if visited[j]:
                continue
            candidate = d + w
            if candidate < dist[j]:
                dist[j] = candidate
                prev[j] = i
                heapq.heappush(frontier, (candidate, j))

    if not visited[dst]:
        raise Unreachable(start, target)

    path = [dst]
    while path[-1] != src:
        path.append(prev[path[-1]])
    path.reverse()
    return [graph.vertex_at(i) for i in path]


def path_weight(graph: WeightedGraph[V], path: list[V]) -> float:
    """Sum of edge weights along consecutive vertices of path."""
    total = 0.0
    for a, b in zip(path, path[1:]):
        w = graph.adjacent(a, b)
        if w is None:
            raise ValueError(f"No edge from {a!r} to {b!r}")
        total += w
    return total


def reachable_within(
    graph: WeightedGraph[V],
    start: V,
    threshold: float,
    distance: Callable[[V, V], float],
) -> set[V]:
    """Vertices reachable from start through graph edges inside a radius.

    A neighbour is explored only when its straight-line ``distance`` from
    the original start is strictly below threshold. The gate is never the
    length of the path walked to get there: a vertex near start but only
    reachable through a far-away vertex is excluded, and a vertex inside the
    radius reached by a long detour is included.
    """
    if start not in graph:
        raise InvalidEndpoint(start)

    origin = graph.index_of(start)
    seen = {origin}
    stack = [origin]
    while stack:
        i = stack.pop()
        for j, _ in graph.out_edges(i):
            if j in seen:
                continue
            if distance(start, graph.vertex_at(j)) < threshold:
                seen.add(j)
                stack.append(j)

    logger.debug("%d vertices within %.1f of %r", len(seen), threshold, start)
    return {graph.vertex_at(i) for i in seen}
