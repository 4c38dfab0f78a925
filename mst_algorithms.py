"""
Prim and Kruskal MST algorithms over the district graph
Both are instrumented with an operation counter and wall-clock timing
"""

import heapq
import itertools
import logging
import math
import time
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

# Cost reported when the graph has no spanning tree
UNREACHABLE_COST = float("inf")


class MSTInvariantError(RuntimeError):
    """Raised when an algorithm reaches a state valid input cannot produce"""


@dataclass(frozen=True)
class MSTResult:
    """Outcome of one MST computation"""

    algorithm: str
    mst_edges: tuple = field(default_factory=tuple)
    total_cost: float = 0
    execution_time_ms: float = 0.0
    operations_count: int = 0
    vertex_count: int = 0
    edge_count: int = 0

    @property
    def mst_edge_count(self):
        return len(self.mst_edges)

    @property
    def has_mst(self):
        return self.total_cost != UNREACHABLE_COST

    def to_dict(self):
        return {
            "algorithm": self.algorithm,
            "mst_edges": [list(edge.to_tuple()) for edge in self.mst_edges],
            "total_cost": self.total_cost if self.has_mst else None,
            "execution_time_ms": self.execution_time_ms,
            "operations_count": self.operations_count,
            "mst_edges_count": self.mst_edge_count,
            "vertex_count": self.vertex_count,
            "edge_count": self.edge_count,
        }

    def __str__(self):
        cost = self.total_cost if self.has_mst else "unreachable"
        return (
            f"MSTResult{{algorithm='{self.algorithm}', totalCost={cost}, "
            f"executionTime={self.execution_time_ms:.3f}ms, "
            f"operations={self.operations_count}, edges={self.mst_edge_count}}}"
        )


def _elapsed_ms(start_time):
    return (time.perf_counter() - start_time) * 1000.0


def _total_weight(edges):
    """Sum edge weights independently of acceptance order"""
    weights = [edge.weight for edge in edges]
    if all(isinstance(weight, int) for weight in weights):
        return sum(weights)
    # fsum is exactly rounded, so any MST of the graph gets the same total
    return math.fsum(weights)


class DisjointSet:
    """Union-find over vertex labels with union by rank and path compression"""

    def __init__(self, vertices):
        self.parent = {vertex: vertex for vertex in vertices}
        self.rank = {vertex: 0 for vertex in vertices}
        self.components = len(self.parent)

    def find(self, vertex):
        """Return the root of vertex, pointing every node on the path at it"""
        root = vertex
        while self.parent[root] != root:
            root = self.parent[root]

        while self.parent[vertex] != root:
            self.parent[vertex], vertex = root, self.parent[vertex]

        return root

    def union(self, first, second):
        """Merge the sets of first and second; False if already merged"""
        root1 = self.find(first)
        root2 = self.find(second)
        if root1 == root2:
            return False

        if self.rank[root1] < self.rank[root2]:
            self.parent[root1] = root2
        elif self.rank[root1] > self.rank[root2]:
            self.parent[root2] = root1
        else:
            self.parent[root2] = root1
            self.rank[root1] += 1

        self.components -= 1
        return True

    def connected(self, first, second):
        return self.find(first) == self.find(second)


class PrimAlgorithm:
    """Grow the tree from the first vertex through a min-heap frontier"""

    name = "Prim"

    def find_mst(self, graph):
        start_time = time.perf_counter()
        operations = 0
        vertex_count = graph.vertex_count()

        if vertex_count == 0:
            return MSTResult(self.name)

        if not graph.is_connected():
            logger.debug("Prim: graph %s is disconnected", graph.id)
            return MSTResult(
                self.name,
                total_cost=UNREACHABLE_COST,
                execution_time_ms=_elapsed_ms(start_time),
                operations_count=operations,
                vertex_count=vertex_count,
                edge_count=graph.edge_count(),
            )

        mst_edges = []
        visited = set()
        frontier = []
        # Sequence number keeps equal weights in insertion order
        sequence = itertools.count()

        start_vertex = graph.vertices()[0]
        visited.add(start_vertex)
        operations += 1

        for edge in graph.incident_edges(start_vertex):
            heapq.heappush(frontier, (edge.weight, next(sequence), edge))
            operations += 1

        while frontier and len(visited) < vertex_count:
            _, _, current_edge = heapq.heappop(frontier)
            operations += 1

            next_vertex = self._unvisited_endpoint(current_edge, visited)
            if next_vertex is None:
                continue

            visited.add(next_vertex)
            mst_edges.append(current_edge)
            operations += 1

            for edge in graph.incident_edges(next_vertex):
                operations += 1
                if edge.other_vertex(next_vertex) not in visited:
                    heapq.heappush(frontier, (edge.weight, next(sequence), edge))
                    operations += 1

        if len(visited) < vertex_count:
            raise MSTInvariantError(
                f"Prim frontier exhausted with {len(visited)}/{vertex_count} "
                f"vertices visited on connected graph {graph.id!r}"
            )

        return MSTResult(
            self.name,
            mst_edges=tuple(mst_edges),
            total_cost=_total_weight(mst_edges),
            execution_time_ms=_elapsed_ms(start_time),
            operations_count=operations,
            vertex_count=vertex_count,
            edge_count=graph.edge_count(),
        )

    @staticmethod
    def _unvisited_endpoint(edge, visited):
        if edge.source not in visited:
            return edge.source
        if edge.destination not in visited:
            return edge.destination
        return None


class KruskalAlgorithm:
    """Accept edges in increasing weight order unless they close a cycle"""

    name = "Kruskal"

    def find_mst(self, graph):
        start_time = time.perf_counter()
        operations = 0
        vertex_count = graph.vertex_count()

        if vertex_count == 0:
            return MSTResult(self.name)

        # sorted() is stable, so equal weights keep edge insertion order
        sorted_edges = sorted(graph.edges(), key=lambda edge: edge.weight)
        operations += len(sorted_edges)

        disjoint_set = DisjointSet(graph.vertices())
        operations += vertex_count

        target = vertex_count - 1
        mst_edges = []

        for edge in sorted_edges:
            operations += 1
            if len(mst_edges) == target:
                break

            root1 = disjoint_set.find(edge.source)
            root2 = disjoint_set.find(edge.destination)
            operations += 2

            if root1 != root2:
                mst_edges.append(edge)
                disjoint_set.union(root1, root2)
                operations += 1

        if len(mst_edges) == target:
            total_cost = _total_weight(mst_edges)
        else:
            logger.debug(
                "Kruskal: graph %s left %d components",
                graph.id,
                disjoint_set.components,
            )
            total_cost = UNREACHABLE_COST
            mst_edges = []

        return MSTResult(
            self.name,
            mst_edges=tuple(mst_edges),
            total_cost=total_cost,
            execution_time_ms=_elapsed_ms(start_time),
            operations_count=operations,
            vertex_count=vertex_count,
            edge_count=graph.edge_count(),
        )


def print_result_details(graph, result, max_edges=5):
    """Print a short report of one MST result against its graph"""
    print(f"\n{result.algorithm} on {graph.id}")
    print("-" * 40)
    print(f"Vertices: {result.vertex_count}  Edges: {result.edge_count}")

    if not result.has_mst:
        components = graph.connected_components()
        print(f"No MST: graph has {len(components)} connected components")
        return

    print(f"MST cost: {result.total_cost}")
    print(f"MST edges: {result.mst_edge_count}/{max(result.vertex_count - 1, 0)} expected")
    print(f"Operations: {result.operations_count}")
    print(f"Execution time: {result.execution_time_ms:.3f} ms")

    if result.mst_edges:
        print(f"Sample MST edges (first {min(max_edges, result.mst_edge_count)}):")
        for edge in result.mst_edges[:max_edges]:
            print(f"  {edge}")
