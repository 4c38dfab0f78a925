"""Tests for check_mst.py"""

import json

from check_mst import (
    INVALID,
    NO_MST,
    VALID,
    main,
    networkx_mst_weight,
    spans_all_vertices,
    validate_result,
)
from graph_io import write_graphs_json
from graph_model import Edge, Graph
from mst_algorithms import UNREACHABLE_COST, KruskalAlgorithm, MSTResult, PrimAlgorithm


class TestReferenceWeight:
    def test_known_graphs(self, square_graph, known_graph):
        assert networkx_mst_weight(square_graph) == 6
        assert networkx_mst_weight(known_graph) == 19

    def test_no_reference_for_disconnected_or_empty(self, disconnected_graph):
        assert networkx_mst_weight(disconnected_graph) is None
        assert networkx_mst_weight(Graph("empty")) is None


class TestSpanning:
    def test_spanning_edges(self, square_graph):
        edges = [Edge("A", "B", 1), Edge("B", "C", 2), Edge("C", "D", 3)]
        assert spans_all_vertices(square_graph, edges)

    def test_missing_vertex(self, square_graph):
        assert not spans_all_vertices(square_graph, [Edge("A", "B", 1), Edge("B", "C", 2)])


class TestValidateResult:
    def test_algorithms_are_valid(self, square_graph, known_graph):
        for graph in (square_graph, known_graph):
            assert validate_result(graph, PrimAlgorithm().find_mst(graph)) == VALID
            assert validate_result(graph, KruskalAlgorithm().find_mst(graph)) == VALID

    def test_disconnected_is_no_mst(self, disconnected_graph):
        result = KruskalAlgorithm().find_mst(disconnected_graph)
        assert validate_result(disconnected_graph, result) == NO_MST

    def test_wrong_cost_is_invalid(self, square_graph):
        edges = (Edge("A", "B", 1), Edge("B", "C", 2), Edge("D", "A", 4))
        result = MSTResult("Fake", mst_edges=edges, total_cost=7, vertex_count=4)
        assert validate_result(square_graph, result) == INVALID

    def test_missing_mst_on_connected_graph_is_invalid(self, square_graph):
        result = MSTResult("Fake", total_cost=UNREACHABLE_COST, vertex_count=4)
        assert validate_result(square_graph, result) == INVALID

    def test_empty_graph_is_valid(self):
        graph = Graph("empty")
        assert validate_result(graph, PrimAlgorithm().find_mst(graph)) == VALID


class TestMain:
    def test_main_reports_no_mismatches(self, tmp_path, capsys, monkeypatch, simple_graphs):
        path = tmp_path / "input.json"
        write_graphs_json(list(simple_graphs.values()), str(path))
        monkeypatch.setattr("sys.argv", ["check_mst.py", str(path)])

        assert main() == 0
        out = capsys.readouterr().out
        assert "simple_known" in out
        assert "mismatches: 0" in out

    def test_main_missing_file(self, tmp_path, monkeypatch):
        monkeypatch.setattr("sys.argv", ["check_mst.py", str(tmp_path / "none.json")])
        assert main() == 1

    def test_main_bad_document(self, tmp_path, monkeypatch):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"graphs": [{"id": "g"}]}))
        monkeypatch.setattr("sys.argv", ["check_mst.py", str(path)])
        assert main() == 1
