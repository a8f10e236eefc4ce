"""Strongly connected components with Tarjan's algorithm.

The traversal keeps an explicit work stack of ``[vertex, next_edge_index]``
frames instead of recursing, so deep or path-like graphs cannot exhaust the
interpreter's recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from depgraph.algorithms.condensation import condense
from depgraph.graph.model import Graph
from depgraph.logging import get_logger
from depgraph.metrics import Metrics

logger = get_logger(__name__)

_UNVISITED = -1


@dataclass
class SCCResult:
    """Components found by :func:`tarjan_scc`.

    Attributes:
        components: Components in completion order, which is a reverse
            topological order of the condensation graph. Each component is
            sorted ascending.
        metrics: One operation per vertex visited and per edge examined.
    """

    components: List[List[int]] = field(default_factory=list)
    metrics: Metrics = field(default_factory=Metrics)

    @property
    def num_components(self) -> int:
        return len(self.components)

    def sizes(self) -> List[int]:
        return [len(c) for c in self.components]


def tarjan_scc(graph: Graph) -> SCCResult:
    """
    Compute the strongly connected components of a graph in O(V + E).

    Roots are tried in ascending vertex id order and neighbors in adjacency
    insertion order, so the output is deterministic for a given graph.

    Args:
        graph: Graph to analyze. Undirected graphs yield their connected
            components, since every edge is stored in both directions.

    Returns:
        SCCResult with the partition of ``[0, graph.num_vertices)``.
    """
    n = graph.num_vertices
    discovery = [_UNVISITED] * n
    low_link = [_UNVISITED] * n
    on_stack = [False] * n
    scc_stack: List[int] = []
    result = SCCResult()
    metrics = result.metrics
    timer = 0

    with metrics.timed():
        for root in range(n):
            if discovery[root] != _UNVISITED:
                continue

            discovery[root] = low_link[root] = timer
            timer += 1
            scc_stack.append(root)
            on_stack[root] = True
            metrics.increment()
            work: List[List[int]] = [[root, 0]]

            while work:
                frame = work[-1]
                u, edge_idx = frame
                edges = graph.edges_from(u)

                if edge_idx < len(edges):
                    frame[1] = edge_idx + 1
                    v = edges[edge_idx].destination
                    metrics.increment()
                    if discovery[v] == _UNVISITED:
                        discovery[v] = low_link[v] = timer
                        timer += 1
                        scc_stack.append(v)
                        on_stack[v] = True
                        metrics.increment()
                        work.append([v, 0])
                    elif on_stack[v]:
                        low_link[u] = min(low_link[u], discovery[v])
                    continue

                # All edges of u examined
                work.pop()
                if low_link[u] == discovery[u]:
                    component: List[int] = []
                    while True:
                        w = scc_stack.pop()
                        on_stack[w] = False
                        component.append(w)
                        if w == u:
                            break
                    component.sort()
                    result.components.append(component)
                if work:
                    parent = work[-1][0]
                    low_link[parent] = min(low_link[parent], low_link[u])

    logger.debug(
        f"Tarjan SCC: {n} vertices -> {result.num_components} components, "
        f"{metrics.operations} operations in {metrics.elapsed_ms:.3f} ms"
    )
    return result


def condense_components(graph: Graph, components: Sequence[Sequence[int]]) -> Graph:
    """
    Collapse a component partition straight into a condensation graph.

    Use :class:`depgraph.algorithms.condensation.CondensationGraph` when the
    vertex-to-component mapping or the DAG check is also needed.

    Args:
        graph: Original graph.
        components: Exact partition of its vertices, e.g.
            ``tarjan_scc(graph).components``.

    Returns:
        Directed graph over component ids without self-loops or parallel arcs.
    """
    return condense(graph, components)[1]
