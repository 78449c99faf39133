"""Directed weighted graph keyed by opaque vertex identifiers.

Vertices live in an arena list and are addressed internally by their
position in it. Each vertex owns a growable list of ``(neighbour_index,
weight)`` pairs, so traversal never goes through a per-edge hash lookup.
"""

import logging
from collections.abc import Hashable, Iterator
from typing import Generic, Optional, TypeVar

from campus_map.errors import InvalidEndpoint

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)


class WeightedGraph(Generic[V]):
    def __init__(self):
        self._index: dict[V, int] = {}
        self._vertices: list[V] = []
        self._edges: list[list[tuple[int, float]]] = []

    def __contains__(self, vertex) -> bool:
        return vertex in self._index

    def __len__(self) -> int:
        return len(self._vertices)

    def _require(self, vertex: V) -> int:
        try:
            return self._index[vertex]
        except KeyError:
            raise InvalidEndpoint(vertex) from None

    @staticmethod
    def _find(edges: list[tuple[int, float]], j: int) -> Optional[int]:
        for pos, (k, _) in enumerate(edges):
            if k == j:
                return pos
        return None

    def add_vertex(self, vertex: V) -> bool:
        """Add a vertex with no outgoing edges.

        Re-adding a vertex that already exists is a no-op: its edges are kept
        and False is returned.
        """
        if vertex in self._index:
            logger.debug("Vertex %r already present; keeping its edges", vertex)
            return False
        self._index[vertex] = len(self._vertices)
        self._vertices.append(vertex)
        self._edges.append([])
        return True

    def add_edge(self, src: V, dest: V, weight: float) -> bool:
        """Set the weight of the edge src -> dest.

        Returns True if the edge is new, False if an existing weight was
        overwritten.

        Raises:
            InvalidEndpoint: if src or dest is not a vertex.
            ValueError: if weight is negative.
        """
        i, j = self._require(src), self._require(dest)
        if weight < 0:
            raise ValueError(f"Edge weight must be non-negative, got {weight}")
        edges = self._edges[i]
        pos = self._find(edges, j)
        if pos is None:
            edges.append((j, weight))
            return True
        edges[pos] = (j, weight)
        return False

    def add_undirected_edge(self, n1: V, n2: V, weight: float) -> bool:
        """Add n1 -> n2 and n2 -> n1 with the same weight.

        True only if neither direction existed before.
        """
        forward = self.add_edge(n1, n2, weight)
        backward = self.add_edge(n2, n1, weight)
        return forward and backward

    def remove_edge(self, src: V, dest: V) -> bool:
        i, j = self._require(src), self._require(dest)
        edges = self._edges[i]
        pos = self._find(edges, j)
        if pos is None:
            return False
        del edges[pos]
        return True

    def vertices(self) -> set[V]:
        return set(self._vertices)

    def adjacent(self, i: V, j: V) -> Optional[float]:
        """Weight of the edge i -> j, or None if there is no such edge."""
        a, b = self._require(i), self._require(j)
        pos = self._find(self._edges[a], b)
        return None if pos is None else self._edges[a][pos][1]

    def neighbors(self, vertex: V) -> set[V]:
        i = self._require(vertex)
        return {self._vertices[j] for j, _ in self._edges[i]}

    def edge_count(self) -> int:
        """Number of directed edge entries."""
        return sum(len(edges) for edges in self._edges)

    # Index-level access for traversal algorithms.

    def index_of(self, vertex: V) -> int:
        return self._require(vertex)

    def vertex_at(self, index: int) -> V:
        return self._vertices[index]

    def out_edges(self, index: int) -> Iterator[tuple[int, float]]:
        return iter(self._edges[index])
