"""Presentation of analysis reports as JSON-ready dicts and plain text."""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from depgraph.algorithms.dag_paths import Distance, PathResult
from depgraph.pipeline import AnalysisReport


def _distance_value(value: Distance) -> Optional[int]:
    """Return an int distance, or None for an unreachable sentinel."""
    return int(value) if math.isfinite(value) else None


def _format_distance(value: Distance) -> str:
    if value == math.inf:
        return "INF"
    if value == -math.inf:
        return "-INF"
    return str(value)


def _path_to_dict(result: PathResult) -> Dict[str, Any]:
    return {
        "source": result.source,
        "distances": [_distance_value(d) for d in result.distances],
        "predecessors": list(result.predecessors),
        "paths": {
            str(v): result.reconstruct_path(v)
            for v in range(len(result.distances))
            if result.is_reachable(v)
        },
        "metrics": result.metrics.to_dict(),
    }


def report_to_dict(report: AnalysisReport) -> Dict[str, Any]:
    """
    Convert an analysis report to JSON-serializable primitives.

    Unreachable distances become None. Stages that did not run are None.
    """
    condensation = report.condensation
    data: Dict[str, Any] = {
        "name": report.name,
        "graph": {
            "vertices": report.graph.num_vertices,
            "arcs": report.graph.num_arcs,
            "directed": report.graph.directed,
            "weight_type": report.graph.weight_type,
            "source": report.source,
        },
        "scc": {
            "components": report.scc.components,
            "sizes": report.scc.sizes(),
            "metrics": report.scc.metrics.to_dict(),
        },
        "condensation": {
            "components": condensation.num_components,
            "edges": [
                {"u": u, "v": v, "w": w} for u, v, w in condensation.graph.arcs()
            ],
            "vertex_to_component": condensation.vertex_to_component,
            "is_dag": report.topo.is_dag,
        },
        "topological_order": {
            "components": report.topo.component_order,
            "tasks": report.topo.task_order,
            "is_dag": report.topo.is_dag,
            "metrics": report.topo.metrics.to_dict(),
        },
        "condensed_source": report.condensed_source,
        "shortest": _path_to_dict(report.shortest) if report.shortest else None,
        "longest": _path_to_dict(report.longest) if report.longest else None,
        "critical_path": None,
    }
    if report.critical is not None:
        data["critical_path"] = {
            "path": report.critical.path,
            "length": _distance_value(report.critical.total_length),
            "start": report.critical.start,
            "end": report.critical.end,
            "metrics": report.critical.metrics.to_dict(),
        }
    return data


def format_table(headers: List[str], rows: List[List[Any]], min_width: int = 8) -> str:
    """Format rows as a simple ASCII table.

    Args:
        headers: Column headers.
        rows: Data rows.
        min_width: Minimum column width.

    Returns:
        Formatted table string (empty if there are no rows).
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = [
        max(min_width, max(len(str(row[i])) for row in all_data))
        for i in range(len(headers))
    ]

    def format_row(row_data: List[Any]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def _path_table(result: PathResult) -> str:
    rows = [
        [v, _format_distance(d), result.reconstruct_path(v)]
        for v, d in enumerate(result.distances)
    ]
    return format_table(["Component", "Distance", "Path"], rows)


def format_report(report: AnalysisReport) -> str:
    """Render an analysis report as human-readable text."""
    graph = report.graph
    condensation = report.condensation
    lines: List[str] = []

    title = report.name or "graph"
    lines.append(f"Dataset: {title}")
    lines.append(
        f"Vertices: {graph.num_vertices} | Directed: {graph.directed} | "
        f"Source: {report.source} | Weight model: {graph.weight_type}"
    )
    lines.append("")

    lines.append(f"Strongly connected components: {report.scc.num_components}")
    lines.append(
        format_table(
            ["Component", "Size", "Vertices"],
            [[i, len(c), c] for i, c in enumerate(report.scc.components)],
        )
    )
    lines.append(
        f"Operations: {report.scc.metrics.operations} | "
        f"Time: {report.scc.metrics.elapsed_ms:.3f} ms"
    )
    lines.append("")

    lines.append(
        f"Condensation: {condensation.num_components} components, "
        f"{condensation.graph.num_arcs} edges"
    )
    for comp in range(condensation.num_components):
        targets = [e.destination for e in condensation.graph.edges_from(comp)]
        if targets:
            lines.append(f"   C{comp} -> {targets}")
    lines.append(f"Is DAG: {report.topo.is_dag}")
    lines.append("")

    lines.append(f"Component order: {report.topo.component_order}")
    lines.append(f"Task order: {report.topo.task_order}")
    lines.append(
        f"Operations: {report.topo.metrics.operations} | "
        f"Time: {report.topo.metrics.elapsed_ms:.3f} ms"
    )

    if report.shortest is None or report.longest is None:
        if graph.num_vertices:
            lines.append("")
            lines.append("Path analysis skipped: condensation is not a DAG.")
        return "\n".join(lines)

    lines.append("")
    lines.append(
        f"Shortest paths from component {report.condensed_source} "
        f"(contains vertex {report.source}):"
    )
    lines.append(_path_table(report.shortest))
    lines.append(f"Relaxations: {report.shortest.metrics.operations}")
    lines.append("")
    lines.append(f"Longest paths from component {report.condensed_source}:")
    lines.append(_path_table(report.longest))
    lines.append(f"Relaxations: {report.longest.metrics.operations}")

    if report.critical is not None:
        lines.append("")
        lines.append(
            f"Critical path: {report.critical.path} "
            f"(length {_format_distance(report.critical.total_length)}, "
            f"component {report.critical.start} -> {report.critical.end})"
        )
    return "\n".join(lines)
