"""
Create the synthetic district graphs used for the Prim/Kruskal comparison
Graphs are written as JSON with CSV summaries per size category
"""

import logging
import os
import random
from enum import Enum

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import networkx as nx

from graph_io import graph_category, write_graphs_csv, write_graphs_json
from graph_model import Edge, Graph

logger = logging.getLogger(__name__)

DEFAULT_SEED = 42
INPUT_DIR = "input"


class GraphSize(Enum):
    """Node count, density range and number of graphs per category"""

    SMALL = ("small", 30, 0.3, 0.6, 5)
    MEDIUM = ("medium", 300, 0.2, 0.4, 10)
    LARGE = ("large", 1000, 0.1, 0.3, 10)
    EXTRA_LARGE = ("xlarge", (1300, 1600, 2000), 0.05, 0.10, 3)

    def __init__(self, prefix, nodes, min_density, max_density, count):
        self.prefix = prefix
        self.nodes = nodes
        self.min_density = min_density
        self.max_density = max_density
        self.count = count

    def node_count(self, index):
        if isinstance(self.nodes, tuple):
            return self.nodes[index]
        return self.nodes


def generate_graph(graph_id, vertex_count, density, rng=None):
    """
    Generate a connected graph on districts D1..Dn.
    A path D1-D2-...-Dn guarantees connectivity, then random roads are added
    until the edge count matches the requested density.
    """
    if rng is None:
        rng = random.Random(DEFAULT_SEED)

    graph = Graph(graph_id)
    for i in range(1, vertex_count + 1):
        graph.add_vertex(f"D{i}")

    max_possible_edges = vertex_count * (vertex_count - 1) // 2
    target_edges = min(
        max_possible_edges,
        max(vertex_count - 1, int(max_possible_edges * density)),
    )

    for i in range(1, vertex_count):
        graph.add_edge(Edge(f"D{i}", f"D{i + 1}", rng.randint(1, 50)))

    while graph.edge_count() < target_edges:
        v1 = rng.randint(1, vertex_count)
        v2 = rng.randint(1, vertex_count)
        if v1 == v2:
            continue

        source, destination = f"D{v1}", f"D{v2}"
        if not graph.contains_edge(source, destination):
            graph.add_edge(Edge(source, destination, rng.randint(1, 100)))

    logger.debug("Generated %s", graph)
    return graph


def create_random_graph(num_nodes=8, edge_probability=0.4, seed=DEFAULT_SEED):
    """Create a random connected Erdos-Renyi graph with random weights"""
    rng = random.Random(seed)

    nx_graph = nx.erdos_renyi_graph(num_nodes, edge_probability, seed=seed)

    # Force connectivity by chaining the components together
    if num_nodes > 0 and not nx.is_connected(nx_graph):
        components = [sorted(c) for c in nx.connected_components(nx_graph)]
        for first, second in zip(components, components[1:]):
            nx_graph.add_edge(first[0], second[0])

    graph = Graph(f"erdos_renyi_{num_nodes}_{seed}")
    for node in nx_graph.nodes():
        graph.add_vertex(f"D{node + 1}")
    for u, v in nx_graph.edges():
        graph.add_edge(Edge(f"D{u + 1}", f"D{v + 1}", rng.randint(1, 10)))

    return graph


def generate_all_test_graphs(seed=DEFAULT_SEED, sizes=None):
    """Generate the test corpus, optionally limited to some GraphSize members"""
    rng = random.Random(seed)
    sizes = list(GraphSize) if sizes is None else list(sizes)

    graphs = []
    for size in GraphSize:
        if size not in sizes:
            continue
        for i in range(size.count):
            density = size.min_density + rng.random() * (
                size.max_density - size.min_density
            )
            graphs.append(
                generate_graph(f"{size.prefix}_{i + 1}", size.node_count(i), density, rng)
            )
        logger.info("Generated %d %s graphs", size.count, size.name.lower())

    return graphs


def create_graph_files(graphs, input_dir=INPUT_DIR):
    """
    Write input.json, a CSV summary, and per-category JSON/CSV files under
    <input_dir>/graphs/<category>/
    """
    os.makedirs(input_dir, exist_ok=True)

    input_file = os.path.join(input_dir, "input.json")
    write_graphs_json(graphs, input_file)

    by_category = {}
    for graph in graphs:
        by_category.setdefault(graph_category(graph.id), []).append(graph)

    for category, category_graphs in by_category.items():
        category_dir = os.path.join(input_dir, "graphs", category)
        write_graphs_json(
            category_graphs, os.path.join(category_dir, f"{category}_graphs.json")
        )
        write_graphs_csv(
            category_graphs, os.path.join(category_dir, f"{category}_summary.csv")
        )

    write_graphs_csv(graphs, os.path.join(input_dir, "graphs_summary.csv"))
    return input_file


def visualize_graph(graph, output_file):
    """Draw a small graph with its edge weights and save to file"""
    nx_graph = graph.to_networkx()

    plt.figure(figsize=(10, 8))
    pos = nx.spring_layout(nx_graph, seed=42)

    nx.draw(
        nx_graph,
        pos,
        with_labels=True,
        node_color="lightblue",
        node_size=700,
        font_size=10,
        font_weight="bold",
        edge_color="gray",
        width=2,
    )

    edge_labels = nx.get_edge_attributes(nx_graph, "weight")
    nx.draw_networkx_edge_labels(nx_graph, pos, edge_labels, font_size=9)

    plt.title(f"District Network {graph.id}", fontsize=14, fontweight="bold")

    os.makedirs(os.path.dirname(output_file) or ".", exist_ok=True)
    plt.savefig(output_file, dpi=150, bbox_inches="tight")
    plt.close()
    logger.info("Visualization saved to %s", output_file)
    return output_file


def print_generation_summary(graphs):
    """Print graph counts, average sizes and connectivity per category"""
    stats = {}
    for graph in graphs:
        entry = stats.setdefault(
            graph_category(graph.id),
            {"count": 0, "vertices": 0, "edges": 0, "connected": 0},
        )
        entry["count"] += 1
        entry["vertices"] += graph.vertex_count()
        entry["edges"] += graph.edge_count()
        if graph.is_connected():
            entry["connected"] += 1

    print("\n" + "=" * 70)
    print("Generation Summary")
    print("=" * 70)
    print(f"Total graphs generated: {len(graphs)}")
    for category, entry in stats.items():
        count = entry["count"]
        print(
            f"{category.upper()}: {count} graphs ({entry['connected']} connected), "
            f"avg {entry['vertices'] // count} vertices, "
            f"avg {entry['edges'] // count} edges"
        )
    print("=" * 70)


def main():
    """Main function to create graph files"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Generate district graphs for the Prim/Kruskal comparison"
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
        "--input-dir",
        type=str,
        default=INPUT_DIR,
        help="Output directory for graph files (default: input)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    sizes = None
    if args.sizes:
        sizes = [GraphSize[name.upper()] for name in args.sizes]

    print("=" * 70)
    print("District Graph Generator")
    print("=" * 70)
    print(f"  Random seed: {args.seed}")
    print(f"  Output directory: {args.input_dir}")

    graphs = generate_all_test_graphs(seed=args.seed, sizes=sizes)
    input_file = create_graph_files(graphs, args.input_dir)
    print_generation_summary(graphs)

    print(f"\nGraphs written to: {input_file}")
    print("To compare Prim and Kruskal on them:")
    print(f"  python run_mst_comparison.py --input {input_file}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
