"""depgraph: dependency graph analysis.

Finds mutually dependent groups (strongly connected components), collapses
them into an acyclic condensation, orders it topologically and computes
shortest, longest and critical paths through it.

Primary API:
    Graph - Weighted adjacency-list graph over integer vertex ids
    tarjan_scc() - Strongly connected components
    CondensationGraph - Component-level graph and DAG check
    KahnSorter, DFSSorter, sort_components() - Topological orders
    DAGPathAnalyzer - Shortest, longest and critical paths on a DAG
    analyze(), analyze_file() - Full pipeline

Example:
    from depgraph import Graph, analyze

    g = Graph(4)
    g.add_edge(0, 1, 5)
    g.add_edge(1, 2, 2)
    g.add_edge(2, 0, 1)
    g.add_edge(2, 3, 7)

    report = analyze(g, source=0)
    report.topo.task_order      # [0, 1, 2, 3]
    report.critical.total_length
"""

from __future__ import annotations

from depgraph.algorithms import (
    ComponentTopoResult,
    CondensationGraph,
    CriticalPathResult,
    DAGPathAnalyzer,
    DFSSorter,
    KahnSorter,
    PathResult,
    SCCResult,
    SortAlg,
    TopologicalSorter,
    TopoResult,
    condense_components,
    sort_components,
    sorter_for,
    tarjan_scc,
)
from depgraph.config import ANALYSIS_CONFIG, AnalysisConfig
from depgraph.graph import Edge, Graph, NodeMap, from_networkx, to_networkx
from depgraph.io import GraphData, graph_to_dict, load_graph_data, parse_graph_data
from depgraph.metrics import Metrics
from depgraph.pipeline import AnalysisReport, analyze, analyze_file

__version__ = "0.1.0"

__all__ = [
    "ANALYSIS_CONFIG",
    "AnalysisConfig",
    "AnalysisReport",
    "ComponentTopoResult",
    "CondensationGraph",
    "CriticalPathResult",
    "DAGPathAnalyzer",
    "DFSSorter",
    "Edge",
    "Graph",
    "GraphData",
    "KahnSorter",
    "Metrics",
    "NodeMap",
    "PathResult",
    "SCCResult",
    "SortAlg",
    "TopoResult",
    "TopologicalSorter",
    "analyze",
    "analyze_file",
    "condense_components",
    "from_networkx",
    "graph_to_dict",
    "load_graph_data",
    "parse_graph_data",
    "sort_components",
    "sorter_for",
    "tarjan_scc",
    "to_networkx",
]
