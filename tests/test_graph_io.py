"""Tests for graph_io.py"""

import csv
import json

import pytest

from graph_io import (
    GraphFormatError,
    graph_category,
    graph_from_dict,
    read_graphs_json,
    size_category,
    write_detailed_csv,
    write_graphs_csv,
    write_graphs_json,
    write_performance_csv,
    write_results_json,
    write_summary_csv,
)
from graph_model import Edge, Graph, InvalidEdgeError, UnknownVertexError
from performance_report import compare_algorithms, summarize_categories


def read_csv(path):
    with open(path, newline="") as f:
        return list(csv.DictReader(f))


class TestCategories:
    @pytest.mark.parametrize(
        "graph_id, expected",
        [
            ("small_1", "small"),
            ("medium_10", "medium"),
            ("large_3", "large"),
            ("xlarge_2", "extra-large"),
            ("simple_square", "unknown"),
        ],
    )
    def test_graph_category(self, graph_id, expected):
        assert graph_category(graph_id) == expected

    def test_size_category(self):
        assert size_category(30) == "Small"
        assert size_category(300) == "Medium"
        assert size_category(1000) == "Large"
        assert size_category(2000) == "Extra_Large"


class TestGraphJson:
    def test_round_trip_preserves_structure(self, tmp_path, square_graph, disconnected_graph):
        directed = Graph.from_lists("d", ["A", "B"], [Edge("A", "B", 2.5)], directed=True)
        path = tmp_path / "nested" / "graphs.json"

        write_graphs_json([square_graph, disconnected_graph, directed], str(path))
        loaded = read_graphs_json(str(path))

        assert [g.id for g in loaded] == ["simple_square", "simple_disconnected", "d"]
        assert loaded[0].vertices() == square_graph.vertices()
        assert [e.to_tuple() for e in loaded[0].edges()] == [
            e.to_tuple() for e in square_graph.edges()
        ]
        assert loaded[2].directed
        assert not loaded[2].contains_edge("B", "A")
        assert loaded[2].edges()[0].weight == 2.5

    def test_document_metadata(self, tmp_path, square_graph):
        path = tmp_path / "graphs.json"
        write_graphs_json([square_graph], str(path))
        data = json.loads(path.read_text())
        assert data["total_graphs"] == 1
        assert "generated_at" in data
        assert data["graphs"][0]["edges"][0] == ["A", "B", 1]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_graphs_json(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(GraphFormatError):
            read_graphs_json(str(path))

    def test_missing_graphs_key(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"results": []}))
        with pytest.raises(GraphFormatError):
            read_graphs_json(str(path))

    def test_malformed_entry(self):
        with pytest.raises(GraphFormatError):
            graph_from_dict({"id": "g", "vertices": ["A"]})
        with pytest.raises(GraphFormatError):
            graph_from_dict({"id": "g", "vertices": ["A", "B"], "edges": [["A", "B"]]})

    def test_structural_errors_propagate(self):
        with pytest.raises(UnknownVertexError):
            graph_from_dict({"id": "g", "vertices": ["A"], "edges": [["A", "B", 1]]})
        with pytest.raises(InvalidEdgeError):
            graph_from_dict({"id": "g", "vertices": ["A", "B"], "edges": [["A", "B", -1]]})


class TestResultFiles:
    @pytest.fixture
    def records(self, square_graph, disconnected_graph):
        return [compare_algorithms(square_graph), compare_algorithms(disconnected_graph)]

    def test_results_json(self, tmp_path, records):
        path = tmp_path / "output.json"
        write_results_json(records, str(path))
        data = json.loads(path.read_text())

        assert data["total_graphs"] == 2
        square, disconnected = data["results"]
        assert square["prim"]["total_cost"] == 6
        assert square["costs_consistent"] is True
        assert disconnected["kruskal"]["total_cost"] is None
        assert disconnected["mst_validation"] == "NO_MST"

    def test_graphs_csv(self, tmp_path, square_graph):
        path = tmp_path / "graphs.csv"
        write_graphs_csv([square_graph], str(path))
        (row,) = read_csv(path)
        assert row["graph_id"] == "simple_square"
        assert row["density"] == "0.8333"
        assert row["is_connected"] == "True"
        assert row["graph_structure_info"] == "V4_E5_D0.833"

    def test_summary_csv(self, tmp_path, records):
        path = tmp_path / "summary.csv"
        write_summary_csv(records, str(path))
        rows = read_csv(path)
        assert rows[0]["prim_total_cost"] == "6"
        assert rows[0]["mst_validation"] == "VALID"
        assert rows[1]["kruskal_total_cost"] == ""
        assert rows[1]["prim_mst_edges_count"] == "0"

    def test_performance_csv(self, tmp_path, records):
        path = tmp_path / "performance.csv"
        write_performance_csv(summarize_categories(records), str(path))
        (row,) = read_csv(path)
        assert row["category"] == "unknown"
        assert row["graph_count"] == "2"
        assert row["connected_graphs_count"] == "1"

    def test_detailed_csv(self, tmp_path, records):
        path = tmp_path / "detailed.csv"
        write_detailed_csv(records, str(path))
        rows = read_csv(path)
        assert [row["algorithm"] for row in rows] == ["Prim", "Prim", "Kruskal", "Kruskal"]
        assert rows[0]["graph_size_category"] == "Small"
        assert rows[0]["performance_note"] == "Fast"
