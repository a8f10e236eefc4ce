"""Condensation of a graph by its strongly connected components."""

from __future__ import annotations

from typing import List, Sequence, Set, Tuple

from depgraph.algorithms.toposort import KahnSorter
from depgraph.graph.model import Graph
from depgraph.logging import get_logger

logger = get_logger(__name__)


def component_index(num_vertices: int, components: Sequence[Sequence[int]]) -> List[int]:
    """
    Map every vertex to the position of its component in ``components``.

    Args:
        num_vertices: Vertex count of the original graph.
        components: Candidate partition of ``[0, num_vertices)``.

    Returns:
        List where entry ``v`` is the component id of vertex ``v``.

    Raises:
        ValueError: If ``components`` is not an exact partition.
    """
    vertex_to_component = [-1] * num_vertices
    for comp_id, members in enumerate(components):
        for v in members:
            if not 0 <= v < num_vertices:
                raise ValueError(
                    f"Component {comp_id} holds vertex {v} outside [0, {num_vertices})."
                )
            if vertex_to_component[v] != -1:
                raise ValueError(
                    f"Vertex {v} appears in components "
                    f"{vertex_to_component[v]} and {comp_id}."
                )
            vertex_to_component[v] = comp_id

    missing = [v for v, c in enumerate(vertex_to_component) if c == -1]
    if missing:
        raise ValueError(f"Vertices {missing} are not covered by any component.")
    return vertex_to_component


def condense(
    graph: Graph, components: Sequence[Sequence[int]]
) -> Tuple[List[int], Graph]:
    """
    Collapse each component into a single vertex.

    Arcs inside a component are dropped. Between two distinct components at
    most one arc is kept per ordered pair, carrying the weight of the first
    such arc met while scanning vertices in id order and each adjacency list
    in insertion order.

    Args:
        graph: Original graph.
        components: Exact partition of the graph's vertices.

    Returns:
        Tuple of (vertex_to_component, condensation graph). The condensation is
        always directed and inherits the original ``weight_type``.
    """
    vertex_to_component = component_index(graph.num_vertices, components)
    condensed = Graph(len(components), True, graph.weight_type)
    seen_pairs: Set[Tuple[int, int]] = set()

    for src, dst, weight in graph.arcs():
        pair = (vertex_to_component[src], vertex_to_component[dst])
        if pair[0] == pair[1] or pair in seen_pairs:
            continue
        seen_pairs.add(pair)
        condensed.add_edge(pair[0], pair[1], weight)

    return vertex_to_component, condensed


class CondensationGraph:
    """
    Component-level view of a graph.

    Built from the original graph and an SCC partition (for example the
    components of :func:`depgraph.algorithms.scc.tarjan_scc`). Component ids are
    positions in the given partition.

    Attributes:
        original: The graph that was condensed.
        components: The partition, each component sorted ascending.
        vertex_to_component: Component id of every original vertex.
        graph: The condensation graph over component ids.
    """

    def __init__(self, graph: Graph, components: Sequence[Sequence[int]]) -> None:
        self.original = graph
        self.components: List[List[int]] = [sorted(c) for c in components]
        self.vertex_to_component, self.graph = condense(graph, self.components)
        logger.debug(
            f"Condensed {graph.num_vertices} vertices into "
            f"{len(self.components)} components with {self.graph.num_arcs} arcs"
        )

    @property
    def num_components(self) -> int:
        return len(self.components)

    def component_of(self, vertex: int) -> int:
        """Return the component id containing an original vertex."""
        if not 0 <= vertex < self.original.num_vertices:
            raise ValueError(
                f"Vertex {vertex} is out of range [0, {self.original.num_vertices})."
            )
        return self.vertex_to_component[vertex]

    def members(self, component: int) -> List[int]:
        """Return the ascending vertex ids of a component."""
        if not 0 <= component < len(self.components):
            raise ValueError(
                f"Component {component} is out of range [0, {len(self.components)})."
            )
        return self.components[component]

    def is_dag(self) -> bool:
        """
        Check acyclicity of the condensation graph with Kahn's elimination.

        A correct SCC partition always yields an acyclic condensation; a False
        result indicates the partition was not the SCC partition.
        """
        return KahnSorter().sort(self.graph).is_dag
