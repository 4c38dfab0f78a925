"""
JSON and CSV persistence for district graphs and MST comparison results
"""

import csv
import json
import logging
import os
from datetime import datetime

from graph_model import Edge, Graph, GraphError

logger = logging.getLogger(__name__)


class GraphFormatError(GraphError):
    """Raised when a stored graph document cannot be decoded"""


def graph_category(graph_id):
    """Size category encoded in a generated graph id"""
    if graph_id.startswith("xlarge"):
        return "extra-large"
    for category in ("small", "medium", "large"):
        if graph_id.startswith(category):
            return category
    return "unknown"


def size_category(vertex_count):
    if vertex_count <= 50:
        return "Small"
    if vertex_count <= 300:
        return "Medium"
    if vertex_count <= 1000:
        return "Large"
    return "Extra_Large"


def _ensure_parent(filename):
    parent = os.path.dirname(filename)
    if parent:
        os.makedirs(parent, exist_ok=True)


def graph_to_dict(graph):
    return {
        "id": graph.id,
        "directed": graph.directed,
        "vertices": graph.vertices(),
        "edges": [list(edge.to_tuple()) for edge in graph.edges()],
    }


def graph_from_dict(data):
    """Rebuild a Graph, keeping vertex and edge order from the document"""
    try:
        graph = Graph(data["id"], directed=data.get("directed", False))
        for vertex in data["vertices"]:
            graph.add_vertex(vertex)
        for source, destination, weight in data["edges"]:
            graph.add_edge(Edge(source, destination, weight))
    except GraphError:
        raise
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise GraphFormatError(f"Malformed graph entry: {exc}") from exc
    return graph


def write_graphs_json(graphs, filename):
    """Write graphs with generation metadata"""
    _ensure_parent(filename)
    data = {
        "graphs": [graph_to_dict(graph) for graph in graphs],
        "generated_at": datetime.now().isoformat(timespec="seconds"),
        "total_graphs": len(graphs),
    }
    with open(filename, "w") as f:
        json.dump(data, f, indent=2)

    logger.info("Wrote %d graphs to %s", len(graphs), filename)
    return filename


def read_graphs_json(filename):
    with open(filename, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise GraphFormatError(f"{filename} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict) or "graphs" not in data:
        raise GraphFormatError(f"{filename} has no 'graphs' list")

    graphs = [graph_from_dict(entry) for entry in data["graphs"]]
    logger.info("Read %d graphs from %s", len(graphs), filename)
    return graphs


def write_results_json(records, filename):
    """Write comparison records; an unreachable cost is stored as null"""
    _ensure_parent(filename)
    output = {
        "results": [record.to_dict() for record in records],
        "timestamp": datetime.now().isoformat(timespec="seconds"),
        "total_graphs": len(records),
    }
    with open(filename, "w") as f:
        json.dump(output, f, indent=2)

    logger.info("Wrote %d results to %s", len(records), filename)
    return filename


GRAPH_SUMMARY_FIELDS = [
    "graph_id",
    "vertex_count",
    "edge_count",
    "density",
    "category",
    "is_connected",
    "graph_structure_info",
]


def write_graphs_csv(graphs, filename):
    _ensure_parent(filename)
    with open(filename, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=GRAPH_SUMMARY_FIELDS)
        writer.writeheader()
        for graph in graphs:
            density = graph.density()
            writer.writerow(
                {
                    "graph_id": graph.id,
                    "vertex_count": graph.vertex_count(),
                    "edge_count": graph.edge_count(),
                    "density": f"{density:.4f}",
                    "category": graph_category(graph.id),
                    "is_connected": graph.is_connected(),
                    "graph_structure_info": (
                        f"V{graph.vertex_count()}_E{graph.edge_count()}_D{density:.3f}"
                    ),
                }
            )
    return filename


def _cost(result):
    return result.total_cost if result.has_mst else ""


SUMMARY_FIELDS = [
    "graph_id",
    "vertex_count",
    "edge_count",
    "category",
    "graph_density",
    "is_connected",
    "prim_total_cost",
    "prim_execution_time_ms",
    "prim_operations_count",
    "prim_mst_edges_count",
    "kruskal_total_cost",
    "kruskal_execution_time_ms",
    "kruskal_operations_count",
    "kruskal_mst_edges_count",
    "costs_consistent",
    "performance_ratio",
    "operations_ratio",
    "mst_validation",
]


def write_summary_csv(records, filename):
    """One row per graph with both algorithms side by side"""
    _ensure_parent(filename)
    with open(filename, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=SUMMARY_FIELDS)
        writer.writeheader()
        for record in records:
            prim, kruskal = record.prim, record.kruskal
            writer.writerow(
                {
                    "graph_id": record.graph_id,
                    "vertex_count": record.vertex_count,
                    "edge_count": record.edge_count,
                    "category": record.category,
                    "graph_density": f"{record.density:.4f}",
                    "is_connected": record.is_connected,
                    "prim_total_cost": _cost(prim),
                    "prim_execution_time_ms": f"{prim.execution_time_ms:.3f}",
                    "prim_operations_count": prim.operations_count,
                    "prim_mst_edges_count": prim.mst_edge_count,
                    "kruskal_total_cost": _cost(kruskal),
                    "kruskal_execution_time_ms": f"{kruskal.execution_time_ms:.3f}",
                    "kruskal_operations_count": kruskal.operations_count,
                    "kruskal_mst_edges_count": kruskal.mst_edge_count,
                    "costs_consistent": record.costs_consistent,
                    "performance_ratio": f"{record.performance_ratio:.3f}",
                    "operations_ratio": f"{record.operations_ratio:.3f}",
                    "mst_validation": record.mst_validation,
                }
            )
    return filename


PERFORMANCE_FIELDS = [
    "category",
    "graph_count",
    "total_vertices",
    "total_edges",
    "avg_vertices",
    "avg_edges",
    "avg_density",
    "connected_graphs_count",
    "avg_prim_time_ms",
    "avg_kruskal_time_ms",
    "avg_time_ratio",
    "min_prim_time",
    "max_prim_time",
    "min_kruskal_time",
    "max_kruskal_time",
    "avg_prim_operations",
    "avg_kruskal_operations",
    "avg_operations_ratio",
    "min_prim_ops",
    "max_prim_ops",
    "min_kruskal_ops",
    "max_kruskal_ops",
    "consistency_rate",
    "total_mst_edges_verified",
    "algorithm_efficiency_summary",
]


def write_performance_csv(category_summaries, filename):
    """One row per size category, from performance_report.summarize_category"""
    _ensure_parent(filename)
    with open(filename, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=PERFORMANCE_FIELDS)
        writer.writeheader()
        for summary in category_summaries:
            row = {}
            for name in PERFORMANCE_FIELDS:
                value = summary[name]
                row[name] = f"{value:.3f}" if isinstance(value, float) else value
            writer.writerow(row)
    return filename


DETAILED_FIELDS = [
    "algorithm",
    "graph_id",
    "vertex_count",
    "edge_count",
    "graph_size_category",
    "total_mst_cost",
    "execution_time_ms",
    "operations_count",
    "mst_edge_count",
    "edges_per_vertex",
    "efficiency_ratio",
    "performance_note",
]


def _performance_note(execution_time_ms):
    if execution_time_ms < 100:
        return "Fast"
    if execution_time_ms < 500:
        return "Medium"
    return "Slow"


def write_detailed_csv(records, filename):
    """One row per algorithm run, all Prim rows first"""
    _ensure_parent(filename)
    with open(filename, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=DETAILED_FIELDS)
        writer.writeheader()
        for attribute in ("prim", "kruskal"):
            for record in records:
                result = getattr(record, attribute)
                edges_per_vertex = (
                    result.edge_count / result.vertex_count if result.vertex_count else 0.0
                )
                efficiency = (
                    result.mst_edge_count / result.operations_count * 1000
                    if result.operations_count
                    else 0.0
                )
                writer.writerow(
                    {
                        "algorithm": result.algorithm,
                        "graph_id": record.graph_id,
                        "vertex_count": result.vertex_count,
                        "edge_count": result.edge_count,
                        "graph_size_category": size_category(result.vertex_count),
                        "total_mst_cost": _cost(result),
                        "execution_time_ms": f"{result.execution_time_ms:.3f}",
                        "operations_count": result.operations_count,
                        "mst_edge_count": result.mst_edge_count,
                        "edges_per_vertex": f"{edges_per_vertex:.3f}",
                        "efficiency_ratio": f"{efficiency:.3f}",
                        "performance_note": _performance_note(result.execution_time_ms),
                    }
                )
    return filename
