"""Loading graph documents from JSON or YAML.

Document shape (validated against ``depgraph/schemas/graph.json``)::

    directed: true
    n: 4
    source: 0               # optional, default 0
    weight_model: edge      # optional
    edges:
      - {u: 0, v: 1, w: 5}
      - {u: 1, v: 2, w: 3}
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import jsonschema
import yaml

from depgraph.config import ANALYSIS_CONFIG, AnalysisConfig
from depgraph.graph.model import Graph
from depgraph.logging import get_logger

logger = get_logger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


@dataclass
class GraphData:
    """A loaded graph plus its designated source vertex and weight model."""

    graph: Graph
    source: int
    weight_type: str


@lru_cache(maxsize=1)
def _graph_schema() -> Dict[str, Any]:
    with (
        resources.files("depgraph.schemas")
        .joinpath("graph.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def parse_graph_data(
    data: Any, config: Optional[AnalysisConfig] = None
) -> GraphData:
    """
    Build a graph from an already-parsed document.

    Args:
        data: Mapping following the graph document schema.
        config: Supplies the default weight model (default: ANALYSIS_CONFIG).

    Returns:
        GraphData with the populated graph.

    Raises:
        ValueError: If the document violates the schema, an edge endpoint is
            out of range, or the source is not a vertex of the graph.
    """
    config = config or ANALYSIS_CONFIG
    if not isinstance(data, dict):
        raise ValueError("Graph document must be a mapping at top level.")

    try:
        jsonschema.validate(data, _graph_schema())
    except jsonschema.ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise ValueError(f"Invalid graph document at {location}: {exc.message}") from exc

    n = int(data["n"])
    weight_type = data.get("weight_model", config.default_weight_type)
    graph = Graph(n, bool(data["directed"]), weight_type)
    for idx, edge in enumerate(data["edges"]):
        try:
            graph.add_edge(int(edge["u"]), int(edge["v"]), int(edge["w"]))
        except ValueError as exc:
            raise ValueError(f"Invalid edge #{idx}: {exc}") from exc

    source = int(data.get("source", 0))
    if n > 0 and source >= n:
        raise ValueError(f"Source vertex {source} is out of range [0, {n}).")

    return GraphData(graph=graph, source=source, weight_type=weight_type)


def load_graph_data(
    path: Union[str, Path], config: Optional[AnalysisConfig] = None
) -> GraphData:
    """
    Read a graph document from a ``.json``, ``.yaml`` or ``.yml`` file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the content cannot be parsed or is not a valid document.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Graph file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ValueError(f"Could not parse {path}: {exc}") from exc

    graph_data = parse_graph_data(data, config)
    logger.debug(
        f"Loaded {path}: {graph_data.graph!r}, source={graph_data.source}"
    )
    return graph_data


def graph_to_dict(graph: Graph, source: int = 0) -> Dict[str, Any]:
    """
    Return the document representation of a graph.

    Undirected graphs list each logical edge once, oriented as its first arc
    in adjacency order; loading the document yields the same set of arcs.
    """
    if graph.directed:
        edges = [{"u": u, "v": v, "w": w} for u, v, w in graph.arcs()]
    else:
        edges = []
        pending: Dict[Tuple[int, int, int], int] = {}
        for u, v, w in graph.arcs():
            mirror = (v, u, w)
            if pending.get(mirror, 0) > 0:
                pending[mirror] -= 1
                continue
            pending[(u, v, w)] = pending.get((u, v, w), 0) + 1
            edges.append({"u": u, "v": v, "w": w})

    return {
        "directed": graph.directed,
        "n": graph.num_vertices,
        "source": source,
        "weight_model": graph.weight_type,
        "edges": edges,
    }
