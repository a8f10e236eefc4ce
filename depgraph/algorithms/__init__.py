"""Graph analysis algorithms: SCC, condensation, topological sort, DAG paths."""

from depgraph.algorithms.condensation import CondensationGraph, condense
from depgraph.algorithms.dag_paths import (
    CriticalPathResult,
    DAGPathAnalyzer,
    PathResult,
)
from depgraph.algorithms.scc import SCCResult, condense_components, tarjan_scc
from depgraph.algorithms.toposort import (
    ComponentTopoResult,
    DFSSorter,
    KahnSorter,
    SortAlg,
    TopologicalSorter,
    TopoResult,
    sort_components,
    sorter_for,
)

__all__ = [
    "ComponentTopoResult",
    "CondensationGraph",
    "CriticalPathResult",
    "DAGPathAnalyzer",
    "DFSSorter",
    "KahnSorter",
    "PathResult",
    "SCCResult",
    "SortAlg",
    "TopoResult",
    "TopologicalSorter",
    "condense",
    "condense_components",
    "sort_components",
    "sorter_for",
    "tarjan_scc",
]
