"""Conversion between :class:`Graph` and NetworkX graphs.

Example:
    >>> import networkx as nx
    >>> from depgraph.graph.convert import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("build", "test", weight=5)
    >>> G.add_edge("test", "deploy", weight=2)
    >>>
    >>> graph, node_map = from_networkx(G)
    >>> node_map.to_index["test"]
    1
    >>> nx_graph = to_networkx(graph)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Tuple

import networkx as nx

from depgraph.graph.model import DEFAULT_WEIGHT_TYPE, Graph


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer vertex ids.

    Attributes:
        to_index: Maps original node names to vertex ids.
        to_name: Maps vertex ids back to original node names.
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> NodeMap:
        """Create a NodeMap from node names listed in vertex id order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, vertices: List[int]) -> List[Hashable]:
        """Translate a list of vertex ids (e.g. a path) to node names."""
        return [self.to_name[v] for v in vertices]

    def __len__(self) -> int:
        return len(self.to_index)


def to_networkx(graph: Graph) -> nx.MultiDiGraph:
    """
    Convert a Graph to a NetworkX MultiDiGraph.

    Every stored arc becomes one edge with a ``weight`` attribute, so parallel
    arcs and both arcs of an undirected edge are kept.

    Args:
        graph: Graph to convert.

    Returns:
        MultiDiGraph on nodes ``0 .. num_vertices - 1`` with graph attributes
        ``directed`` and ``weight_type``.
    """
    nx_graph = nx.MultiDiGraph(directed=graph.directed, weight_type=graph.weight_type)
    nx_graph.add_nodes_from(range(graph.num_vertices))
    for src, dst, weight in graph.arcs():
        nx_graph.add_edge(src, dst, weight=weight)
    return nx_graph


def from_networkx(
    G: Any,
    *,
    weight_attr: str = "weight",
    default_weight: int = 1,
    weight_type: str = DEFAULT_WEIGHT_TYPE,
) -> Tuple[Graph, NodeMap]:
    """
    Convert a NetworkX graph to a Graph.

    Nodes are numbered in ``G.nodes`` order. Undirected inputs produce
    undirected graphs (each edge stored as two arcs).

    Args:
        G: NetworkX Graph, DiGraph, MultiGraph or MultiDiGraph.
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight for edges lacking ``weight_attr``.
        weight_type: Weight-model label for the new graph.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        ValueError: If an edge weight is not an integer.
    """
    node_map = NodeMap.from_names(list(G.nodes))
    graph = Graph(len(node_map), G.is_directed(), weight_type)

    for u, v, data in G.edges(data=True):
        weight = data.get(weight_attr, default_weight)
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise ValueError(
                f"Edge ({u!r}, {v!r}) has non-integer {weight_attr!r}: {weight!r}"
            )
        graph.add_edge(node_map.to_index[u], node_map.to_index[v], weight)
    return graph, node_map
