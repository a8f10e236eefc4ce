"""Adjacency-list graph over integer vertex ids.

Vertices are the integers ``0 .. num_vertices - 1``. Edges are appended only;
there is no removal or weight mutation. Outgoing arcs are kept in insertion
order, which determines traversal order in every algorithm built on top.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

#: Weight-model label used when none is given.
DEFAULT_WEIGHT_TYPE = "edge"


@dataclass(frozen=True)
class Edge:
    """A weighted arc owned by its source vertex's adjacency list.

    Attributes:
        destination: Target vertex id.
        weight: Integer weight (e.g. task duration).
    """

    destination: int
    weight: int


class Graph:
    """
    Weighted graph stored as one list of outgoing edges per vertex.

    For undirected graphs, ``add_edge(u, v, w)`` stores two arcs (u->v and
    v->u), so arc counts are doubled compared to the number of logical edges.

    Attributes:
        num_vertices: Fixed number of vertices.
        directed: Whether the graph is directed.
        weight_type: Free-form label describing what weights measure.
    """

    def __init__(
        self,
        num_vertices: int,
        directed: bool = True,
        weight_type: str = DEFAULT_WEIGHT_TYPE,
    ) -> None:
        if num_vertices < 0:
            raise ValueError(
                f"Number of vertices must be non-negative, got {num_vertices}."
            )
        self._num_vertices = num_vertices
        self._directed = directed
        self.weight_type = weight_type
        self._adj: List[List[Edge]] = [[] for _ in range(num_vertices)]
        self._num_arcs = 0

    @property
    def num_vertices(self) -> int:
        return self._num_vertices

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def num_arcs(self) -> int:
        """Number of stored arcs (two per undirected edge)."""
        return self._num_arcs

    def __len__(self) -> int:
        return self._num_vertices

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return (
            f"Graph(num_vertices={self._num_vertices}, {kind}, "
            f"arcs={self._num_arcs}, weight_type={self.weight_type!r})"
        )

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self._num_vertices:
            raise ValueError(
                f"Vertex {vertex} is out of range [0, {self._num_vertices})."
            )

    def add_edge(self, src: int, dst: int, weight: int) -> None:
        """
        Append an arc src->dst (and dst->src if undirected).

        Args:
            src: Source vertex id.
            dst: Destination vertex id.
            weight: Arc weight.

        Raises:
            ValueError: If either vertex is out of range.
        """
        self._check_vertex(src)
        self._check_vertex(dst)
        self._adj[src].append(Edge(dst, weight))
        self._num_arcs += 1
        if not self._directed:
            self._adj[dst].append(Edge(src, weight))
            self._num_arcs += 1

    def edges_from(self, vertex: int) -> List[Edge]:
        """
        Return the outgoing arcs of ``vertex`` in insertion order.

        The returned list is the internal adjacency list and must not be
        modified by callers.

        Raises:
            ValueError: If the vertex is out of range.
        """
        self._check_vertex(vertex)
        return self._adj[vertex]

    def arcs(self) -> Iterator[Tuple[int, int, int]]:
        """Yield every stored arc as ``(src, dst, weight)`` in adjacency order."""
        for src, edges in enumerate(self._adj):
            for edge in edges:
                yield src, edge.destination, edge.weight

    def reverse(self) -> Graph:
        """
        Build a new graph with every arc flipped.

        Weights, ``directed`` and ``weight_type`` are preserved. For undirected
        graphs the result holds the same arcs as the original.

        Returns:
            Graph: The reversed graph.
        """
        reversed_graph = Graph(self._num_vertices, True, self.weight_type)
        for src, dst, weight in self.arcs():
            reversed_graph.add_edge(dst, src, weight)
        reversed_graph._directed = self._directed
        return reversed_graph
