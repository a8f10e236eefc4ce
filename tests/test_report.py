"""Tests for report rendering."""

import json

from depgraph.graph.model import Graph
from depgraph.pipeline import analyze
from depgraph.report import format_report, format_table, report_to_dict


def _with_unreachable() -> Graph:
    # 0 -[3]-> 1, vertex 2 isolated
    g = Graph(3)
    g.add_edge(0, 1, 3)
    return g


class TestReportToDict:
    def test_is_json_serializable(self, cycle_with_tail):
        data = report_to_dict(analyze(cycle_with_tail, name="tail"))
        text = json.dumps(data)
        assert json.loads(text) == data
        assert data["name"] == "tail"

    def test_sections(self, cycle_with_tail):
        data = report_to_dict(analyze(cycle_with_tail))
        assert data["graph"] == {
            "vertices": 5,
            "arcs": 5,
            "directed": True,
            "weight_type": "edge",
            "source": 0,
        }
        assert data["scc"]["components"] == [[4], [3], [0, 1, 2]]
        assert data["scc"]["sizes"] == [1, 1, 3]
        assert data["condensation"]["edges"] == [
            {"u": 1, "v": 0, "w": 6},
            {"u": 2, "v": 1, "w": 4},
        ]
        assert data["condensation"]["vertex_to_component"] == [2, 2, 2, 1, 0]
        assert data["topological_order"]["tasks"] == [0, 1, 2, 3, 4]
        assert data["critical_path"]["length"] == 10
        assert set(data["scc"]["metrics"]) == {"operations", "elapsed_ms"}

    def test_unreachable_distances_become_none(self):
        data = report_to_dict(analyze(_with_unreachable(), source=0))
        # components: [[1], [0], [2]], source vertex 0 is component 1
        assert data["condensed_source"] == 1
        assert data["shortest"]["distances"] == [3, 0, None]
        assert data["longest"]["distances"] == [3, 0, None]
        assert data["shortest"]["predecessors"] == [1, None, None]
        assert data["shortest"]["paths"] == {"0": [1, 0], "1": [1]}

    def test_skipped_stages_are_none(self):
        data = report_to_dict(analyze(Graph(0)))
        assert data["shortest"] is None
        assert data["longest"] is None
        assert data["critical_path"] is None


class TestFormatReport:
    def test_contains_all_sections(self):
        text = format_report(analyze(_with_unreachable(), name="sample"))
        assert "Dataset: sample" in text
        assert "Strongly connected components: 3" in text
        assert "C1 -> [0]" in text
        assert "Is DAG: True" in text
        assert "Task order: [0, 2, 1]" in text
        assert "INF" in text
        assert "-INF" in text
        assert "Critical path: [1, 0] (length 3, component 1 -> 0)" in text

    def test_empty_graph(self):
        text = format_report(analyze(Graph(0)))
        assert "Strongly connected components: 0" in text
        assert "skipped" not in text


def test_format_table():
    table = format_table(["A", "B"], [[1, "xyz"], [22, "w"]], min_width=2)
    lines = table.splitlines()
    assert lines[0] == "   A  | B  "
    assert lines[1] == "   ---+----"
    assert lines[2] == "   1  | xyz"
    assert format_table(["A"], []) == ""
