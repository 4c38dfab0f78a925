"""
Performance comparison of Prim and Kruskal
Builds per-graph comparison records, prints the analysis and writes charts
"""

import logging
import os
from dataclasses import dataclass

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from check_mst import INVALID, NO_MST, VALID, networkx_mst_weight, validate_result
from graph_io import graph_category
from mst_algorithms import KruskalAlgorithm, PrimAlgorithm

logger = logging.getLogger(__name__)

CATEGORY_ORDER = ["small", "medium", "large", "extra-large", "unknown"]


def _ratio(numerator, denominator):
    return numerator / denominator if denominator else 0.0


def _average(values):
    values = list(values)
    return sum(values) / len(values) if values else 0.0


@dataclass(frozen=True)
class ComparisonRecord:
    """Prim and Kruskal results for one graph"""

    graph_id: str
    category: str
    vertex_count: int
    edge_count: int
    density: float
    is_connected: bool
    prim: object
    kruskal: object
    mst_validation: str = VALID

    @property
    def costs_consistent(self):
        return self.prim.total_cost == self.kruskal.total_cost

    @property
    def performance_ratio(self):
        return _ratio(self.kruskal.execution_time_ms, self.prim.execution_time_ms)

    @property
    def operations_ratio(self):
        return _ratio(self.kruskal.operations_count, self.prim.operations_count)

    def to_dict(self):
        return {
            "graph_id": self.graph_id,
            "category": self.category,
            "vertex_count": self.vertex_count,
            "edge_count": self.edge_count,
            "graph_density": self.density,
            "is_connected": self.is_connected,
            "prim": self.prim.to_dict(),
            "kruskal": self.kruskal.to_dict(),
            "costs_consistent": self.costs_consistent,
            "performance_ratio": self.performance_ratio,
            "operations_ratio": self.operations_ratio,
            "mst_validation": self.mst_validation,
        }


def compare_algorithms(graph, prim=None, kruskal=None):
    """Run both algorithms on graph and check them against networkx"""
    prim = prim or PrimAlgorithm()
    kruskal = kruskal or KruskalAlgorithm()

    prim_result = prim.find_mst(graph)
    kruskal_result = kruskal.find_mst(graph)

    expected = networkx_mst_weight(graph)
    statuses = {
        validate_result(graph, prim_result, expected),
        validate_result(graph, kruskal_result, expected),
    }
    if statuses == {VALID}:
        validation = VALID
    elif statuses == {NO_MST}:
        validation = NO_MST
    else:
        validation = INVALID
        logger.warning(
            "Graph %s: Prim cost %s, Kruskal cost %s, networkx cost %s",
            graph.id,
            prim_result.total_cost,
            kruskal_result.total_cost,
            expected,
        )

    return ComparisonRecord(
        graph_id=graph.id,
        category=graph_category(graph.id),
        vertex_count=graph.vertex_count(),
        edge_count=graph.edge_count(),
        density=graph.density(),
        is_connected=graph.is_connected(),
        prim=prim_result,
        kruskal=kruskal_result,
        mst_validation=validation,
    )


def group_by_category(records):
    groups = {}
    for record in records:
        groups.setdefault(record.category, []).append(record)
    return {
        category: groups[category]
        for category in sorted(groups, key=lambda c: CATEGORY_ORDER.index(c))
    }


def summarize_category(category, records):
    """Aggregate statistics for one size category"""
    # unreachable results stop early, keep them out of timing figures
    timed = [r for r in records if r.prim.has_mst and r.kruskal.has_mst]
    prim_times = [r.prim.execution_time_ms for r in timed]
    kruskal_times = [r.kruskal.execution_time_ms for r in timed]
    prim_ops = [r.prim.operations_count for r in timed]
    kruskal_ops = [r.kruskal.operations_count for r in timed]

    avg_prim_time = _average(prim_times)
    avg_kruskal_time = _average(kruskal_times)
    avg_prim_ops = _average(prim_ops)
    avg_kruskal_ops = _average(kruskal_ops)
    avg_time_ratio = _ratio(avg_kruskal_time, avg_prim_time)
    avg_operations_ratio = _ratio(avg_kruskal_ops, avg_prim_ops)

    if not timed:
        efficiency = "No_valid_MST"
    else:
        if avg_time_ratio < 1.0:
            efficiency = "Kruskal_faster"
        elif avg_time_ratio > 1.0:
            efficiency = "Prim_faster"
        else:
            efficiency = "Equal_performance"
        if avg_operations_ratio < 1.0:
            efficiency += "_Kruskal_more_efficient"
        elif avg_operations_ratio > 1.0:
            efficiency += "_Prim_more_efficient"

    return {
        "category": category,
        "graph_count": len(records),
        "total_vertices": sum(r.vertex_count for r in records),
        "total_edges": sum(r.edge_count for r in records),
        "avg_vertices": _average(r.vertex_count for r in records),
        "avg_edges": _average(r.edge_count for r in records),
        "avg_density": _average(r.density for r in records),
        "connected_graphs_count": sum(1 for r in records if r.is_connected),
        "avg_prim_time_ms": avg_prim_time,
        "avg_kruskal_time_ms": avg_kruskal_time,
        "avg_time_ratio": avg_time_ratio,
        "min_prim_time": min(prim_times, default=0.0),
        "max_prim_time": max(prim_times, default=0.0),
        "min_kruskal_time": min(kruskal_times, default=0.0),
        "max_kruskal_time": max(kruskal_times, default=0.0),
        "avg_prim_operations": avg_prim_ops,
        "avg_kruskal_operations": avg_kruskal_ops,
        "avg_operations_ratio": avg_operations_ratio,
        "min_prim_ops": min(prim_ops, default=0),
        "max_prim_ops": max(prim_ops, default=0),
        "min_kruskal_ops": min(kruskal_ops, default=0),
        "max_kruskal_ops": max(kruskal_ops, default=0),
        "consistency_rate": _average(1.0 if r.costs_consistent else 0.0 for r in records)
        * 100,
        "total_mst_edges_verified": sum(r.prim.mst_edge_count for r in records),
        "algorithm_efficiency_summary": efficiency,
    }


def summarize_categories(records):
    return [
        summarize_category(category, group)
        for category, group in group_by_category(records).items()
    ]


def _print_statistics(records):
    valid = [r for r in records if r.prim.has_mst and r.kruskal.has_mst]
    if not valid:
        print("No valid MSTs found (possibly disconnected graphs)")
        return

    consistent = sum(1 for r in valid if r.costs_consistent)
    avg_prim_time = _average(r.prim.execution_time_ms for r in valid)
    avg_kruskal_time = _average(r.kruskal.execution_time_ms for r in valid)
    avg_prim_ops = _average(r.prim.operations_count for r in valid)
    avg_kruskal_ops = _average(r.kruskal.operations_count for r in valid)

    print(
        f"Average Execution Time: Prim={avg_prim_time:.2f}ms, "
        f"Kruskal={avg_kruskal_time:.2f}ms"
    )
    print(f"Time Ratio (Kruskal/Prim): {_ratio(avg_kruskal_time, avg_prim_time):.2f}")
    print(f"Average Operations: Prim={avg_prim_ops:.0f}, Kruskal={avg_kruskal_ops:.0f}")
    print(f"Operations Ratio (Kruskal/Prim): {_ratio(avg_kruskal_ops, avg_prim_ops):.2f}")
    print(
        f"Cost Consistency: {consistent / len(records) * 100:.1f}% "
        f"({consistent}/{len(records)})"
    )
    print(f"Valid MSTs found: {len(valid)}/{len(records)}")


def analyze_results(records):
    """Print the per-category and overall performance analysis"""
    print("\n" + "=" * 70)
    print(" " * 22 + "PERFORMANCE ANALYSIS")
    print("=" * 70)

    for category, group in group_by_category(records).items():
        print(f"\n--- {category.upper()} Graphs ({len(group)} instances) ---")
        _print_statistics(group)

    print("\n" + "=" * 70)
    print(" " * 25 + "OVERALL SUMMARY")
    print("=" * 70)
    print(f"Total Graphs Processed: {len(records)}")
    print(f"Valid Connected Graphs: {sum(1 for r in records if r.prim.has_mst)}")
    total_prim = sum(r.prim.execution_time_ms for r in records if r.prim.has_mst)
    total_kruskal = sum(r.kruskal.execution_time_ms for r in records if r.kruskal.has_mst)
    print(f"Total Execution Time: Prim={total_prim:.2f}ms, Kruskal={total_kruskal:.2f}ms")
    _print_statistics(records)

    invalid = [r.graph_id for r in records if r.mst_validation == INVALID]
    if invalid:
        print(f"✗ Results disagreeing with networkx: {', '.join(invalid)}")
    else:
        print("✓ All results agree with networkx")


# Text charts


def _bar(value, unit, width=30):
    return "#" * min(int(value // unit), width)


def _cost_label(result):
    return str(result.total_cost) if result.has_mst else "none"


def execution_time_chart(records):
    lines = [
        "EXECUTION TIME COMPARISON - Prim vs Kruskal",
        "=" * 45,
        "",
        f"{'Graph':<17} | {'Prim (ms)':>9} | {'Kruskal (ms)':>12} | {'Ratio (K/P)':>11}",
        "-" * 18 + "|" + "-" * 11 + "|" + "-" * 14 + "|" + "-" * 12,
    ]
    for r in records:
        lines.append(
            f"{r.graph_id:<17} | {r.prim.execution_time_ms:>9.3f} | "
            f"{r.kruskal.execution_time_ms:>12.3f} | {r.performance_ratio:>11.2f}"
        )

    avg_prim = _average(r.prim.execution_time_ms for r in records)
    avg_kruskal = _average(r.kruskal.execution_time_ms for r in records)
    lines += [
        "",
        "SUMMARY STATISTICS:",
        f"Average Time - Prim: {avg_prim:.2f} ms, Kruskal: {avg_kruskal:.2f} ms",
        f"Overall Ratio (Kruskal/Prim): {_ratio(avg_kruskal, avg_prim):.2f}",
    ]
    return "\n".join(lines) + "\n"


def operations_chart(records):
    lines = [
        "OPERATIONS COUNT COMPARISON - Prim vs Kruskal",
        "=" * 46,
        "",
        f"{'Graph':<17} | {'Prim Ops':>9} | {'Kruskal Ops':>11} | {'Ratio (K/P)':>11}",
        "-" * 18 + "|" + "-" * 11 + "|" + "-" * 13 + "|" + "-" * 12,
    ]
    for r in records:
        lines.append(
            f"{r.graph_id:<17} | {r.prim.operations_count:>9} | "
            f"{r.kruskal.operations_count:>11} | {r.operations_ratio:>11.2f}"
        )

    avg_prim = _average(r.prim.operations_count for r in records)
    avg_kruskal = _average(r.kruskal.operations_count for r in records)
    lines += [
        "",
        "SUMMARY STATISTICS:",
        f"Average Operations - Prim: {avg_prim:.0f}, Kruskal: {avg_kruskal:.0f}",
        f"Overall Ratio (Kruskal/Prim): {_ratio(avg_kruskal, avg_prim):.2f}",
    ]
    return "\n".join(lines) + "\n"


def cost_comparison_chart(records):
    lines = [
        "MST COST COMPARISON - Consistency Check",
        "=" * 40,
        "",
        f"{'Graph':<17} | {'Prim Cost':>9} | {'Kruskal Cost':>12} | Consistent",
        "-" * 18 + "|" + "-" * 11 + "|" + "-" * 14 + "|" + "-" * 11,
    ]
    consistent = 0
    for r in records:
        if r.costs_consistent:
            consistent += 1
        lines.append(
            f"{r.graph_id:<17} | {_cost_label(r.prim):>9} | "
            f"{_cost_label(r.kruskal):>12} | {'✓' if r.costs_consistent else '✗':>10}"
        )

    rate = _ratio(consistent, len(records)) * 100
    lines += [
        "",
        "SUMMARY STATISTICS:",
        f"Consistency Rate: {rate:.1f}% ({consistent}/{len(records)})",
    ]
    return "\n".join(lines) + "\n"


def ascii_time_chart(records, unit_ms=5):
    lines = [
        "ASCII EXECUTION TIME COMPARISON CHART",
        "=" * 38,
        "",
        f"Each '#' represents {unit_ms}ms",
        "",
    ]
    for i, r in enumerate(records, 1):
        prim_time = r.prim.execution_time_ms
        kruskal_time = r.kruskal.execution_time_ms
        lines.append(f"{'G' + str(i):<4}: Prim [{_bar(prim_time, unit_ms):<30}] {prim_time:.3f} ms")
        lines.append(f"{'':<4}: Krus [{_bar(kruskal_time, unit_ms):<30}] {kruskal_time:.3f} ms")
        lines.append("")
    return "\n".join(lines) + "\n"


def ascii_operations_chart(records, unit_ops=500):
    lines = [
        "ASCII OPERATIONS COUNT COMPARISON CHART",
        "=" * 40,
        "",
        f"Each '#' represents {unit_ops} operations",
        "",
    ]
    for i, r in enumerate(records, 1):
        prim_ops = r.prim.operations_count
        kruskal_ops = r.kruskal.operations_count
        lines.append(f"{'G' + str(i):<4}: Prim [{_bar(prim_ops, unit_ops):<30}] {prim_ops} ops")
        lines.append(f"{'':<4}: Krus [{_bar(kruskal_ops, unit_ops):<30}] {kruskal_ops} ops")
        lines.append("")
    return "\n".join(lines) + "\n"


CHARTS = {
    "execution_time_chart.txt": execution_time_chart,
    "operations_chart.txt": operations_chart,
    "cost_comparison_chart.txt": cost_comparison_chart,
    "ascii_time_chart.txt": ascii_time_chart,
    "ascii_operations_chart.txt": ascii_operations_chart,
}


def generate_performance_charts(records, output_dir):
    """Write every text chart to output_dir and return the written paths"""
    os.makedirs(output_dir, exist_ok=True)

    paths = []
    for filename, render in CHARTS.items():
        path = os.path.join(output_dir, filename)
        with open(path, "w", encoding="utf-8") as f:
            f.write(render(records))
        paths.append(path)

    logger.info("Performance charts generated in %s", output_dir)
    return paths


def plot_performance_comparison(records, save_path):
    """Grouped bar chart of execution time and operations per graph"""
    labels = [r.graph_id for r in records]
    positions = range(len(records))
    width = 0.4

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(max(8, len(records) * 0.6), 10))

    ax1.set_title("Execution Time (ms)", fontsize=14, fontweight="bold")
    ax1.bar(
        [p - width / 2 for p in positions],
        [r.prim.execution_time_ms for r in records],
        width,
        label="Prim",
        color="lightblue",
    )
    ax1.bar(
        [p + width / 2 for p in positions],
        [r.kruskal.execution_time_ms for r in records],
        width,
        label="Kruskal",
        color="lightgreen",
    )
    ax1.legend()

    ax2.set_title("Operations", fontsize=14, fontweight="bold")
    ax2.bar(
        [p - width / 2 for p in positions],
        [r.prim.operations_count for r in records],
        width,
        label="Prim",
        color="lightblue",
    )
    ax2.bar(
        [p + width / 2 for p in positions],
        [r.kruskal.operations_count for r in records],
        width,
        label="Kruskal",
        color="lightgreen",
    )
    ax2.legend()

    for ax in (ax1, ax2):
        ax.set_xticks(list(positions))
        ax.set_xticklabels(labels, rotation=45, ha="right")

    plt.tight_layout()
    os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    logger.info("Performance plot saved to %s", save_path)
    return save_path
