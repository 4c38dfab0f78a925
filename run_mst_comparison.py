"""
Compare Prim and Kruskal on the district graph corpus
Loads or generates the graphs, runs both algorithms and writes every report
"""

import logging
import os
import sys

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import networkx as nx

from create_graph_files import (
    DEFAULT_SEED,
    INPUT_DIR,
    GraphSize,
    create_graph_files,
    generate_all_test_graphs,
    print_generation_summary,
)
from graph_io import (
    read_graphs_json,
    write_detailed_csv,
    write_graphs_json,
    write_performance_csv,
    write_results_json,
    write_summary_csv,
)
from graph_model import GraphError
from mst_algorithms import KruskalAlgorithm, PrimAlgorithm, print_result_details
from performance_report import (
    analyze_results,
    compare_algorithms,
    generate_performance_charts,
    plot_performance_comparison,
    summarize_categories,
)

logger = logging.getLogger(__name__)

OUTPUT_DIR = "output"
MAX_VISUALIZED_VERTICES = 30


def visualize_mst(graph, result, save_path):
    """Draw the original graph next to its MST"""
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 6))

    nx_graph = graph.to_networkx()
    pos = nx.spring_layout(nx_graph, seed=42)

    ax1.set_title("Original Graph", fontsize=14, fontweight="bold")
    nx.draw(
        nx_graph,
        pos,
        ax=ax1,
        with_labels=True,
        node_color="lightblue",
        node_size=500,
        font_size=9,
        font_weight="bold",
    )
    edge_labels = nx.get_edge_attributes(nx_graph, "weight")
    nx.draw_networkx_edge_labels(nx_graph, pos, edge_labels, ax=ax1, font_size=8)

    ax2.set_title(
        f"MST ({result.algorithm}, cost={result.total_cost})",
        fontsize=14,
        fontweight="bold",
    )
    mst_graph = nx.Graph()
    mst_graph.add_nodes_from(nx_graph.nodes())
    for edge in result.mst_edges:
        mst_graph.add_edge(edge.source, edge.destination, weight=edge.weight)

    nx.draw(
        mst_graph,
        pos,
        ax=ax2,
        with_labels=True,
        node_color="lightgreen",
        node_size=500,
        font_size=9,
        font_weight="bold",
        edge_color="red",
        width=3,
    )
    if result.mst_edges:
        mst_labels = nx.get_edge_attributes(mst_graph, "weight")
        nx.draw_networkx_edge_labels(mst_graph, pos, mst_labels, ax=ax2, font_size=8)

    plt.tight_layout()
    os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    logger.info("MST visualization saved to %s", save_path)
    return mst_graph


def load_graphs(input_file, generate=False, seed=DEFAULT_SEED, sizes=None):
    """Read graphs from input_file, generating them first when asked or missing"""
    if generate or not os.path.exists(input_file):
        if not generate:
            logger.info("%s not found, generating new test graphs", input_file)
        graphs = generate_all_test_graphs(seed=seed, sizes=sizes)
        input_dir = os.path.dirname(input_file) or "."
        create_graph_files(graphs, input_dir)
        if os.path.basename(input_file) != "input.json":
            write_graphs_json(graphs, input_file)
        print_generation_summary(graphs)
        return graphs

    return read_graphs_json(input_file)


def demonstrate_graph_features(graph):
    """Print the detailed report and a few queries for one sample graph"""
    print("\n" + "=" * 70)
    print("Sample Graph Details")
    print("=" * 70)
    print(graph.detailed_info())

    vertices = graph.vertices()
    if vertices:
        sample = vertices[0]
        print(f"Neighbors of {sample}: {graph.neighbors(sample)}")
        print(f"Degree of {sample}: {graph.degree(sample)}")
        print(f"Incident edges to {sample}: {len(graph.incident_edges(sample))}")
    if not graph.is_connected():
        print(f"Connected components: {len(graph.connected_components())}")


def run_comparison(graphs, output_dir=OUTPUT_DIR, visualize=False):
    """Run both algorithms on every graph and write all outputs"""
    prim = PrimAlgorithm()
    kruskal = KruskalAlgorithm()
    records = []

    for i, graph in enumerate(graphs, 1):
        logger.info(
            "Processing [%d/%d] %s (%d vertices, %d edges)",
            i,
            len(graphs),
            graph.id,
            graph.vertex_count(),
            graph.edge_count(),
        )
        record = compare_algorithms(graph, prim, kruskal)
        records.append(record)

        if visualize and record.prim.has_mst and graph.vertex_count() <= MAX_VISUALIZED_VERTICES:
            visualize_mst(
                graph,
                record.prim,
                os.path.join(output_dir, "mst_visualizations", f"{graph.id}_mst.png"),
            )

    performance_dir = os.path.join(output_dir, "performance")
    write_results_json(records, os.path.join(output_dir, "output.json"))
    write_summary_csv(records, os.path.join(performance_dir, "summary.csv"))
    write_performance_csv(
        summarize_categories(records),
        os.path.join(performance_dir, "performance_comparison.csv"),
    )
    write_detailed_csv(records, os.path.join(performance_dir, "detailed_results.csv"))

    generate_performance_charts(records, os.path.join(output_dir, "visual_charts"))
    if records:
        plot_performance_comparison(
            records, os.path.join(output_dir, "visual_charts", "performance_comparison.png")
        )

    return records


def print_summary(graphs, records):
    """Print the per-graph table and a sample MST"""
    print("\n" + "=" * 70)
    print(" " * 25 + "SUMMARY")
    print("=" * 70)
    print(
        f"{'Graph':<14} {'Nodes':<7} {'Edges':<8} {'Prim':<10} {'Kruskal':<10} {'Status':<10}"
    )
    print("-" * 70)

    for record in records:
        prim_cost = record.prim.total_cost if record.prim.has_mst else "-"
        kruskal_cost = record.kruskal.total_cost if record.kruskal.has_mst else "-"
        print(
            f"{record.graph_id:<14} {record.vertex_count:<7} {record.edge_count:<8} "
            f"{str(prim_cost):<10} {str(kruskal_cost):<10} {record.mst_validation:<10}"
        )

    if graphs and records:
        print_result_details(graphs[0], records[0].prim)

    valid = sum(1 for r in records if r.prim.has_mst)
    print(f"\nValid MSTs found: {valid}/{len(records)}")


def main(argv=None):
    """Main function - compare Prim and Kruskal on every input graph"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Compare Prim and Kruskal MSTs on district graphs"
    )
    parser.add_argument(
        "--generate",
        action="store_true",
        help="Generate a fresh graph corpus even if the input file exists",
    )
    parser.add_argument(
        "--input",
        type=str,
        default=os.path.join(INPUT_DIR, "input.json"),
        help="Graphs JSON file (default: input/input.json)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=OUTPUT_DIR,
        help="Directory for results and charts (default: output)",
    )
    parser.add_argument(
        "--seed", type=int, default=DEFAULT_SEED, help="Random seed (default: 42)"
    )
    parser.add_argument(
        "--sizes",
        nargs="+",
        choices=[size.name.lower() for size in GraphSize],
        help="Size categories to generate (default: all)",
    )
    parser.add_argument(
        "--visualize",
        action="store_true",
        help=f"Draw MSTs of graphs with at most {MAX_VISUALIZED_VERTICES} vertices",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    sizes = [GraphSize[name.upper()] for name in args.sizes] if args.sizes else None

    print("=" * 70)
    print(" " * 12 + "District Network MST - Prim vs Kruskal")
    print("=" * 70)

    try:
        graphs = load_graphs(args.input, args.generate, args.seed, sizes)
        if not graphs:
            print("No graphs to process!")
            return 0

        demonstrate_graph_features(graphs[0])
        records = run_comparison(graphs, args.output_dir, args.visualize)
    except (GraphError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    analyze_results(records)
    print_summary(graphs, records)

    print("\n" + "=" * 70)
    print(f"Results saved to: {os.path.join(args.output_dir, 'output.json')}")
    print(f"Charts saved to: {os.path.join(args.output_dir, 'visual_charts')}")
    print("=" * 70)
    return 0


if __name__ == "__main__":
    sys.exit(main())
