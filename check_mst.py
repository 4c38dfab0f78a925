"""
Cross-check Prim and Kruskal results against networkx
"""

import logging
import math
import sys
from collections import deque

import networkx as nx

from graph_model import GraphError

logger = logging.getLogger(__name__)

VALID = "VALID"
INVALID = "INVALID"
NO_MST = "NO_MST"


def networkx_mst_weight(graph):
    """Reference MST weight, or None when no spanning tree exists"""
    nx_graph = graph.to_networkx()
    if nx_graph.number_of_nodes() == 0:
        return None
    if graph.directed or not nx.is_connected(nx_graph):
        return None

    mst = nx.minimum_spanning_tree(nx_graph, weight="weight")
    return sum(data["weight"] for _, _, data in mst.edges(data=True))


def spans_all_vertices(graph, edges):
    """Check that the edges reach every vertex of graph from the first one"""
    vertices = graph.vertices()
    if not vertices:
        return True

    adjacency = {vertex: set() for vertex in vertices}
    for edge in edges:
        adjacency[edge.source].add(edge.destination)
        adjacency[edge.destination].add(edge.source)

    visited = {vertices[0]}
    queue = deque([vertices[0]])
    while queue:
        current = queue.popleft()
        for neighbor in adjacency[current]:
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    return len(visited) == len(vertices)


def validate_result(graph, result, expected_weight=None):
    """
    Classify an MST result as VALID, INVALID or NO_MST.
    expected_weight can be passed in to avoid recomputing the reference.
    """
    if expected_weight is None:
        expected_weight = networkx_mst_weight(graph)

    if not result.has_mst:
        return NO_MST if expected_weight is None else INVALID

    if graph.vertex_count() == 0:
        return VALID if result.mst_edge_count == 0 else INVALID

    if expected_weight is None:
        return INVALID
    if result.mst_edge_count != graph.vertex_count() - 1:
        return INVALID
    if not spans_all_vertices(graph, result.mst_edges):
        return INVALID
    if not math.isclose(result.total_cost, expected_weight):
        return INVALID
    return VALID


def main():
    """Compare both algorithms with networkx on every graph of an input file"""
    import argparse

    from graph_io import read_graphs_json
    from mst_algorithms import KruskalAlgorithm, PrimAlgorithm

    parser = argparse.ArgumentParser(
        description="Validate Prim and Kruskal MSTs against networkx"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="input/input.json",
        help="Graphs JSON file (default: input/input.json)",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")

    try:
        graphs = read_graphs_json(args.input)
    except (GraphError, OSError) as exc:
        logger.error("Could not load %s: %s", args.input, exc)
        return 1

    print("=" * 70)
    print(f"{'Graph':<14} {'Vertices':<9} {'NetworkX':<10} {'Prim':<10} {'Kruskal':<10}")
    print("-" * 70)

    failures = 0
    for graph in graphs:
        expected = networkx_mst_weight(graph)
        prim = PrimAlgorithm().find_mst(graph)
        kruskal = KruskalAlgorithm().find_mst(graph)
        prim_status = validate_result(graph, prim, expected)
        kruskal_status = validate_result(graph, kruskal, expected)
        if INVALID in (prim_status, kruskal_status):
            failures += 1

        print(
            f"{graph.id:<14} {graph.vertex_count():<9} {str(expected):<10} "
            f"{prim_status:<10} {kruskal_status:<10}"
        )

    print("=" * 70)
    print(f"Graphs checked: {len(graphs)}, mismatches: {failures}")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
