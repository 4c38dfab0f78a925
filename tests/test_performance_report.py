"""Tests for performance_report.py"""

import pytest

from graph_model import Edge, Graph
from mst_algorithms import MSTResult, UNREACHABLE_COST
from performance_report import (
    ComparisonRecord,
    analyze_results,
    ascii_operations_chart,
    ascii_time_chart,
    compare_algorithms,
    cost_comparison_chart,
    execution_time_chart,
    generate_performance_charts,
    group_by_category,
    operations_chart,
    plot_performance_comparison,
    summarize_category,
)


def make_record(graph_id, prim_time, kruskal_time, prim_ops, kruskal_ops, cost=10):
    prim = MSTResult("Prim", total_cost=cost, execution_time_ms=prim_time, operations_count=prim_ops)
    kruskal = MSTResult(
        "Kruskal", total_cost=cost, execution_time_ms=kruskal_time, operations_count=kruskal_ops
    )
    return ComparisonRecord(
        graph_id=graph_id,
        category=graph_id.split("_")[0],
        vertex_count=30,
        edge_count=100,
        density=0.2,
        is_connected=cost != UNREACHABLE_COST,
        prim=prim,
        kruskal=kruskal,
    )


@pytest.fixture
def records():
    return [
        make_record("small_1", 10.0, 5.0, 1000, 600),
        make_record("small_2", 20.0, 10.0, 3000, 1400),
        make_record("medium_1", 40.0, 60.0, 5000, 8000),
    ]


class TestComparisonRecord:
    def test_compare_algorithms(self, square_graph):
        record = compare_algorithms(square_graph)
        assert record.graph_id == "simple_square"
        assert record.category == "unknown"
        assert record.costs_consistent
        assert record.mst_validation == "VALID"
        assert record.prim.total_cost == record.kruskal.total_cost == 6

    def test_disconnected_record(self, disconnected_graph):
        record = compare_algorithms(disconnected_graph)
        assert not record.is_connected
        assert record.mst_validation == "NO_MST"
        assert record.costs_consistent

    def test_float_weights_are_consistent(self):
        graph = Graph.from_lists(
            "floats",
            ["A", "B", "C", "D"],
            [
                Edge("A", "B", 0.3),
                Edge("B", "C", 0.2),
                Edge("C", "D", 0.1),
                Edge("A", "D", 0.7),
            ],
        )
        record = compare_algorithms(graph)
        assert record.costs_consistent
        assert record.mst_validation == "VALID"

    def test_ratios(self):
        record = make_record("small_1", 10.0, 5.0, 1000, 600)
        assert record.performance_ratio == pytest.approx(0.5)
        assert record.operations_ratio == pytest.approx(0.6)

    def test_zero_ratio_when_prim_is_zero(self):
        record = make_record("small_1", 0.0, 5.0, 0, 600)
        assert record.performance_ratio == 0.0
        assert record.operations_ratio == 0.0

    def test_to_dict(self):
        data = make_record("small_1", 10.0, 5.0, 1000, 600).to_dict()
        assert data["prim"]["total_cost"] == 10
        assert data["graph_density"] == 0.2


class TestSummaries:
    def test_group_by_category_order(self, records):
        assert list(group_by_category(reversed(records))) == ["small", "medium"]

    def test_summarize_category(self, records):
        summary = summarize_category("small", records[:2])
        assert summary["graph_count"] == 2
        assert summary["avg_prim_time_ms"] == pytest.approx(15.0)
        assert summary["avg_time_ratio"] == pytest.approx(0.5)
        assert summary["min_kruskal_ops"] == 600
        assert summary["max_prim_ops"] == 3000
        assert summary["consistency_rate"] == pytest.approx(100.0)
        assert summary["algorithm_efficiency_summary"] == "Kruskal_faster_Kruskal_more_efficient"

    def test_summarize_skips_unreachable_timings(self, records):
        unreachable = make_record("small_3", 0.01, 0.01, 4, 4, cost=UNREACHABLE_COST)
        summary = summarize_category("small", records[:2] + [unreachable])
        assert summary["graph_count"] == 3
        assert summary["connected_graphs_count"] == 2
        assert summary["avg_prim_time_ms"] == pytest.approx(15.0)
        assert summary["avg_kruskal_time_ms"] == pytest.approx(7.5)
        assert summary["min_prim_time"] == pytest.approx(10.0)
        assert summary["min_kruskal_ops"] == 600
        assert summary["avg_prim_operations"] == pytest.approx(2000.0)
        assert summary["algorithm_efficiency_summary"] == "Kruskal_faster_Kruskal_more_efficient"

    def test_summarize_only_unreachable(self):
        unreachable = make_record("small_1", 0.01, 0.02, 4, 4, cost=UNREACHABLE_COST)
        summary = summarize_category("small", [unreachable])
        assert summary["avg_prim_time_ms"] == 0.0
        assert summary["max_kruskal_ops"] == 0
        assert summary["algorithm_efficiency_summary"] == "No_valid_MST"

    def test_summarize_prim_faster(self, records):
        summary = summarize_category("medium", records[2:])
        assert summary["algorithm_efficiency_summary"] == "Prim_faster_Prim_more_efficient"

    def test_analyze_results_prints_sections(self, records, capsys):
        analyze_results(records)
        out = capsys.readouterr().out
        assert "--- SMALL Graphs (2 instances) ---" in out
        assert "--- MEDIUM Graphs (1 instances) ---" in out
        assert "Total Graphs Processed: 3" in out

    def test_analyze_results_without_valid_msts(self, capsys):
        analyze_results([make_record("small_1", 1.0, 1.0, 0, 4, cost=UNREACHABLE_COST)])
        assert "No valid MSTs found" in capsys.readouterr().out


class TestCharts:
    def test_execution_time_chart(self, records):
        chart = execution_time_chart(records)
        assert chart.startswith("EXECUTION TIME COMPARISON - Prim vs Kruskal")
        assert "small_1" in chart
        assert "Average Time - Prim: 23.33 ms, Kruskal: 25.00 ms" in chart

    def test_operations_chart(self, records):
        assert "Average Operations - Prim: 3000, Kruskal: 3333" in operations_chart(records)

    def test_cost_chart_marks_inconsistent(self, records):
        broken = make_record("small_3", 1.0, 1.0, 10, 10)
        broken = ComparisonRecord(
            **{**broken.__dict__, "kruskal": MSTResult("Kruskal", total_cost=11)}
        )
        chart = cost_comparison_chart(records + [broken])
        assert "✗" in chart
        assert "Consistency Rate: 75.0% (3/4)" in chart

    def test_ascii_bars(self, records):
        chart = ascii_time_chart(records)
        assert "G1  : Prim [##" in chart
        assert "G3  : Prim [########" in chart
        ops_chart = ascii_operations_chart(records)
        assert "Each '#' represents 500 operations" in ops_chart
        assert "[######" in ops_chart

    def test_bars_are_capped(self):
        chart = ascii_time_chart([make_record("large_1", 10000.0, 1.0, 1, 1)])
        assert "#" * 31 not in chart

    def test_generate_performance_charts(self, tmp_path, records):
        paths = generate_performance_charts(records, str(tmp_path / "charts"))
        assert len(paths) == 5
        assert (tmp_path / "charts" / "ascii_time_chart.txt").exists()

    def test_plot_performance_comparison(self, tmp_path, records):
        path = plot_performance_comparison(records, str(tmp_path / "plot.png"))
        assert (tmp_path / "plot.png").stat().st_size > 0
        assert path.endswith("plot.png")
