"""End-to-end dependency analysis: SCC -> condensation -> sort -> DAG paths."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from depgraph.algorithms.condensation import CondensationGraph
from depgraph.algorithms.dag_paths import (
    CriticalPathResult,
    DAGPathAnalyzer,
    PathResult,
)
from depgraph.algorithms.scc import SCCResult, tarjan_scc
from depgraph.algorithms.toposort import (
    ComponentTopoResult,
    sort_components,
    sorter_for,
)
from depgraph.config import ANALYSIS_CONFIG, AnalysisConfig
from depgraph.graph.model import Graph
from depgraph.io import load_graph_data
from depgraph.logging import get_logger

logger = get_logger(__name__)


@dataclass
class AnalysisReport:
    """Every stage result of one analysis run.

    Attributes:
        graph: The analyzed graph.
        source: Designated source vertex in the original graph.
        scc: Strongly connected components.
        condensation: Component-level graph.
        topo: Component and task orders.
        condensed_source: Component containing ``source`` (None for an empty graph).
        shortest: Shortest paths from ``condensed_source``, if computed.
        longest: Longest paths from ``condensed_source``, if computed.
        critical: Critical path of the condensation, if computed.
        name: Optional label (e.g. the dataset file name).
    """

    graph: Graph
    source: int
    scc: SCCResult
    condensation: CondensationGraph
    topo: ComponentTopoResult
    condensed_source: Optional[int] = None
    shortest: Optional[PathResult] = None
    longest: Optional[PathResult] = None
    critical: Optional[CriticalPathResult] = None
    name: Optional[str] = None

    @property
    def is_dag(self) -> bool:
        return self.topo.is_dag


def analyze(
    graph: Graph,
    source: int = 0,
    config: Optional[AnalysisConfig] = None,
    name: Optional[str] = None,
) -> AnalysisReport:
    """
    Run the full analysis on a graph.

    Path analysis runs on the condensation, from the component that contains
    ``source``, and only when the component sort confirms acyclicity.

    Args:
        graph: Graph to analyze.
        source: Source vertex of the original graph.
        config: Analysis settings (default: ANALYSIS_CONFIG).
        name: Optional label stored on the report.

    Returns:
        AnalysisReport with the stages that ran.

    Raises:
        ValueError: If ``source`` is not a vertex of a non-empty graph.
    """
    config = config or ANALYSIS_CONFIG
    label = name or "graph"
    if graph.num_vertices and not 0 <= source < graph.num_vertices:
        raise ValueError(
            f"Source {source} is out of range [0, {graph.num_vertices})."
        )

    scc = tarjan_scc(graph)
    logger.info(
        f"{label}: {scc.num_components} strongly connected components "
        f"({scc.metrics.operations} ops, {scc.metrics.elapsed_ms:.3f} ms)"
    )

    condensation = CondensationGraph(graph, scc.components)
    topo = sort_components(condensation, sorter_for(config.sort_alg))
    logger.info(
        f"{label}: condensation has {condensation.num_components} components and "
        f"{condensation.graph.num_arcs} edges; is_dag={topo.is_dag}"
    )

    report = AnalysisReport(
        graph=graph,
        source=source,
        scc=scc,
        condensation=condensation,
        topo=topo,
        name=name,
    )
    if graph.num_vertices == 0:
        return report

    report.condensed_source = condensation.component_of(source)
    if not topo.is_dag:
        logger.warning(f"{label}: condensation is not a DAG, skipping path analysis")
        return report

    analyzer = DAGPathAnalyzer(condensation.graph)
    report.shortest = analyzer.shortest_paths(report.condensed_source)
    report.longest = analyzer.longest_paths(report.condensed_source)

    if config.should_compute_critical_path(condensation.num_components):
        report.critical = analyzer.critical_path()
        logger.info(
            f"{label}: critical path length {report.critical.total_length} "
            f"from component {report.critical.start} to {report.critical.end}"
        )
    elif config.critical_path:
        logger.warning(
            f"{label}: {condensation.num_components} components exceed "
            f"critical_path_max_components={config.critical_path_max_components}, "
            "skipping critical path"
        )
    return report


def analyze_file(
    path: Union[str, Path], config: Optional[AnalysisConfig] = None
) -> AnalysisReport:
    """Load a graph document and analyze it from its designated source."""
    path = Path(path)
    data = load_graph_data(path, config)
    logger.info(
        f"Analyzing {path.name}: {data.graph.num_vertices} vertices, "
        f"{data.graph.num_arcs} arcs, weight model '{data.weight_type}'"
    )
    return analyze(data.graph, data.source, config, name=path.name)
