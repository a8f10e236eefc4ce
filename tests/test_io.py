"""Tests for graph document loading."""

import json
from pathlib import Path

import pytest

from depgraph.config import AnalysisConfig
from depgraph.graph.model import Edge, Graph
from depgraph.io import graph_to_dict, load_graph_data, parse_graph_data

EXAMPLES = Path(__file__).resolve().parents[1] / "examples"


def _doc(**overrides):
    data = {
        "directed": True,
        "n": 3,
        "edges": [{"u": 0, "v": 1, "w": 4}, {"u": 1, "v": 2, "w": 2}],
    }
    data.update(overrides)
    return data


class TestParseGraphData:
    def test_minimal_document(self):
        gd = parse_graph_data(_doc())
        assert gd.source == 0
        assert gd.weight_type == "edge"
        assert gd.graph.num_vertices == 3
        assert gd.graph.edges_from(0) == [Edge(1, 4)]
        assert gd.graph.weight_type == "edge"

    def test_source_and_weight_model(self):
        gd = parse_graph_data(_doc(source=2, weight_model="hours"))
        assert gd.source == 2
        assert gd.weight_type == "hours"
        assert gd.graph.weight_type == "hours"

    def test_default_weight_model_from_config(self):
        gd = parse_graph_data(_doc(), AnalysisConfig(default_weight_type="cost"))
        assert gd.weight_type == "cost"

    def test_undirected(self):
        gd = parse_graph_data(_doc(directed=False))
        assert not gd.graph.directed
        assert gd.graph.num_arcs == 4

    def test_empty_graph(self):
        gd = parse_graph_data({"directed": True, "n": 0, "edges": []})
        assert gd.graph.num_vertices == 0

    @pytest.mark.parametrize(
        "data,location",
        [
            ({"n": 1, "edges": []}, "<root>"),
            (_doc(n=-1), "n"),
            (_doc(edges=[{"u": 0, "v": 1}]), "edges/0"),
            (_doc(edges=[{"u": 0, "v": 1, "w": 1.5}]), "edges/0/w"),
            (_doc(directed="yes"), "directed"),
            (_doc(extra=1), "<root>"),
        ],
    )
    def test_schema_violations(self, data, location):
        with pytest.raises(ValueError, match=f"Invalid graph document at {location}"):
            parse_graph_data(data)

    def test_not_a_mapping(self):
        with pytest.raises(ValueError, match="mapping"):
            parse_graph_data([1, 2, 3])

    def test_edge_out_of_range(self):
        with pytest.raises(ValueError, match="Invalid edge #1"):
            parse_graph_data(_doc(edges=[{"u": 0, "v": 1, "w": 1}, {"u": 0, "v": 3, "w": 1}]))

    def test_source_out_of_range(self):
        with pytest.raises(ValueError, match="Source vertex 3"):
            parse_graph_data(_doc(source=3))


class TestLoadGraphData:
    def test_json_file(self, tmp_path):
        path = tmp_path / "g.json"
        path.write_text(json.dumps(_doc(source=1)))
        gd = load_graph_data(path)
        assert gd.source == 1
        assert gd.graph.num_arcs == 2

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "g.yaml"
        path.write_text(
            "directed: false\nn: 2\nweight_model: hours\nedges:\n  - {u: 0, v: 1, w: 3}\n"
        )
        gd = load_graph_data(str(path))
        assert not gd.graph.directed
        assert gd.weight_type == "hours"
        assert gd.graph.edges_from(1) == [Edge(0, 3)]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_graph_data(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Could not parse"):
            load_graph_data(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("edges: [unclosed\n")
        with pytest.raises(ValueError, match="Could not parse"):
            load_graph_data(path)

    @pytest.mark.parametrize(
        "name", ["small_cyclic.json", "small_dag.yaml", "multi_scc.json"]
    )
    def test_bundled_examples(self, name):
        gd = load_graph_data(EXAMPLES / name)
        assert gd.graph.num_vertices > 0
        assert 0 <= gd.source < gd.graph.num_vertices


class TestGraphToDict:
    def test_directed_round_trip(self, diamond_dag):
        data = graph_to_dict(diamond_dag, source=2)
        assert data["source"] == 2
        assert data["edges"][0] == {"u": 0, "v": 1, "w": 5}
        restored = parse_graph_data(data).graph
        assert list(restored.arcs()) == list(diamond_dag.arcs())

    def test_undirected_lists_each_edge_once(self):
        g = Graph(3, directed=False, weight_type="km")
        g.add_edge(0, 1, 2)
        g.add_edge(2, 1, 5)
        g.add_edge(0, 1, 2)
        g.add_edge(1, 1, 7)
        data = graph_to_dict(g)
        assert len(data["edges"]) == 4
        assert data["weight_model"] == "km"
        restored = parse_graph_data(data).graph
        assert sorted(restored.arcs()) == sorted(g.arcs())
