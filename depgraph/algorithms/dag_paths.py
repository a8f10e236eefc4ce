"""Shortest, longest and critical paths on a directed acyclic graph.

All computations relax arcs once, walking vertices in topological order, so
each single-source run costs O(V + E). Longest paths are only tractable here
because the graph is acyclic.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Union

from depgraph.algorithms.toposort import KahnSorter
from depgraph.graph.model import Graph
from depgraph.logging import get_logger
from depgraph.metrics import Metrics

logger = get_logger(__name__)

#: Path length: an int for reachable vertices, +/- math.inf otherwise.
Distance = Union[int, float]


@dataclass
class PathResult:
    """Single-source shortest or longest path distances.

    Attributes:
        source: Source vertex id.
        distances: Distance per vertex; ``math.inf`` (shortest mode) or
            ``-math.inf`` (longest mode) marks unreachable vertices.
        predecessors: Previous vertex on the chosen path, None for the source
            and for unreachable vertices.
        longest: True for longest-path mode.
        metrics: One operation per relaxed arc.
    """

    source: int
    distances: List[Distance]
    predecessors: List[Optional[int]]
    longest: bool = False
    metrics: Metrics = field(default_factory=Metrics)

    def is_reachable(self, vertex: int) -> bool:
        return math.isfinite(self.distances[vertex])

    def reconstruct_path(self, destination: int) -> List[int]:
        """
        Return the vertices from the source to ``destination``.

        Args:
            destination: Target vertex id.

        Returns:
            List of vertex ids starting at the source, or an empty list if the
            destination is unreachable.

        Raises:
            ValueError: If the destination is out of range or the predecessor
                chain does not lead back to the source.
        """
        if not 0 <= destination < len(self.distances):
            raise ValueError(
                f"Vertex {destination} is out of range [0, {len(self.distances)})."
            )
        if not self.is_reachable(destination):
            return []

        path = [destination]
        current = self.predecessors[destination]
        while current is not None:
            path.append(current)
            if len(path) > len(self.distances):
                raise ValueError("Predecessor chain contains a cycle.")
            current = self.predecessors[current]

        if path[-1] != self.source:
            raise ValueError(
                f"Predecessor chain of {destination} ends at {path[-1]}, "
                f"not at source {self.source}."
            )
        path.reverse()
        return path


@dataclass
class CriticalPathResult:
    """Globally longest path of a DAG.

    Attributes:
        path: Vertex ids along the critical path (empty for an empty graph).
        total_length: Sum of weights along the path (``-math.inf`` if empty).
        start: First vertex of the path, or None.
        end: Last vertex of the path, or None.
        metrics: Aggregated operations of every single-source run.
    """

    path: List[int] = field(default_factory=list)
    total_length: Distance = -math.inf
    start: Optional[int] = None
    end: Optional[int] = None
    metrics: Metrics = field(default_factory=Metrics)


class DAGPathAnalyzer:
    """
    Path analysis over an acyclic graph.

    The graph is checked with Kahn's algorithm on construction, and the
    resulting order drives every relaxation pass.

    Raises:
        ValueError: On construction, if the graph contains a directed cycle.
    """

    def __init__(self, graph: Graph) -> None:
        topo = KahnSorter().sort(graph)
        if not topo.is_dag:
            raise ValueError(
                "Path analysis requires an acyclic graph; "
                f"{graph.num_vertices - len(topo.order)} vertices lie on or behind cycles."
            )
        self.graph = graph
        self.order = topo.order

    def _check_source(self, source: int) -> None:
        if not 0 <= source < self.graph.num_vertices:
            raise ValueError(
                f"Source {source} is out of range [0, {self.graph.num_vertices})."
            )

    def _relax(self, source: int, longest: bool) -> PathResult:
        self._check_source(source)
        n = self.graph.num_vertices
        unreached: Distance = -math.inf if longest else math.inf
        distances: List[Distance] = [unreached] * n
        predecessors: List[Optional[int]] = [None] * n
        distances[source] = 0
        metrics = Metrics()

        with metrics.timed():
            for u in self.order:
                dist_u = distances[u]
                if dist_u == unreached:
                    continue
                for edge in self.graph.edges_from(u):
                    metrics.increment()
                    v = edge.destination
                    candidate = dist_u + edge.weight
                    if (
                        candidate > distances[v]
                        if longest
                        else candidate < distances[v]
                    ):
                        distances[v] = candidate
                        predecessors[v] = u

        return PathResult(
            source=source,
            distances=distances,
            predecessors=predecessors,
            longest=longest,
            metrics=metrics,
        )

    def shortest_paths(self, source: int) -> PathResult:
        """Minimum-weight distances from ``source`` to every vertex."""
        return self._relax(source, longest=False)

    def longest_paths(self, source: int) -> PathResult:
        """Maximum-weight distances from ``source`` to every vertex."""
        return self._relax(source, longest=True)

    def critical_path(self) -> CriticalPathResult:
        """
        Find the longest path over all (source, destination) pairs.

        Sources and destinations are scanned in ascending id order and only a
        strictly longer path replaces the current best, so ties go to the
        first pair found. Costs O(V * (V + E)).

        Returns:
            CriticalPathResult for the best pair.
        """
        result = CriticalPathResult()
        best: Optional[PathResult] = None
        metrics = result.metrics

        with metrics.timed():
            for src in range(self.graph.num_vertices):
                run = self.longest_paths(src)
                metrics.merge(run.metrics)
                for dst, dist in enumerate(run.distances):
                    if dist != -math.inf and dist > result.total_length:
                        result.total_length = dist
                        result.start = src
                        result.end = dst
                        best = run

            if best is not None and result.end is not None:
                result.path = best.reconstruct_path(result.end)

        logger.debug(
            f"Critical path {result.path} with length {result.total_length} "
            f"({metrics.operations} relaxations)"
        )
        return result
