"""Graph model and conversion helpers."""

from depgraph.graph.convert import NodeMap, from_networkx, to_networkx
from depgraph.graph.model import DEFAULT_WEIGHT_TYPE, Edge, Graph

__all__ = [
    "DEFAULT_WEIGHT_TYPE",
    "Edge",
    "Graph",
    "NodeMap",
    "from_networkx",
    "to_networkx",
]
