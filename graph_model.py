"""
Graph model for the district connectivity network
Vertices are district labels, edges are weighted roads between them
"""

import math
import operator
from collections import deque
from dataclasses import dataclass, field
from numbers import Real

import networkx as nx


class GraphError(ValueError):
    """Base error for invalid graph structure"""


class InvalidEdgeError(GraphError):
    """Raised when an edge cannot be constructed"""


class UnknownVertexError(GraphError):
    """Raised when an edge references a vertex missing from the graph"""


def _check_label(label, role):
    if not isinstance(label, str) or not label:
        raise InvalidEdgeError(f"{role} must be a non-empty string, got {label!r}")


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Undirected weighted road between two districts.
    Two edges are equal when they join the same pair of districts,
    whatever the direction or weight. Edges order by weight.
    """

    source: str
    destination: str
    weight: Real
    key: tuple = field(init=False, repr=False)

    def __post_init__(self):
        _check_label(self.source, "source")
        _check_label(self.destination, "destination")
        if self.source == self.destination:
            raise InvalidEdgeError(f"Self loop on {self.source!r} is not allowed")
        if isinstance(self.weight, bool) or not isinstance(self.weight, Real):
            raise InvalidEdgeError(f"Weight must be a number, got {self.weight!r}")
        if not math.isfinite(self.weight):
            raise InvalidEdgeError(f"Weight must be finite, got {self.weight}")
        if self.weight < 0:
            raise InvalidEdgeError(f"Weight cannot be negative, got {self.weight}")

        low, high = sorted((self.source, self.destination))
        object.__setattr__(self, "key", (low, high))

    @property
    def id(self):
        return f"{self.key[0]}-{self.key[1]}"

    def other_vertex(self, vertex):
        """Return the endpoint opposite to vertex"""
        if vertex == self.source:
            return self.destination
        if vertex == self.destination:
            return self.source
        raise ValueError(f"Vertex {vertex!r} is not part of edge {self.id}")

    def contains_vertex(self, vertex):
        return vertex == self.source or vertex == self.destination

    def to_tuple(self):
        return (self.source, self.destination, self.weight)

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def _compare_weight(self, other, op):
        if not isinstance(other, Edge):
            return NotImplemented
        return op(self.weight, other.weight)

    def __lt__(self, other):
        return self._compare_weight(other, operator.lt)

    def __le__(self, other):
        return self._compare_weight(other, operator.le)

    def __gt__(self, other):
        return self._compare_weight(other, operator.gt)

    def __ge__(self, other):
        return self._compare_weight(other, operator.ge)

    def __str__(self):
        return f"Edge[{self.source} --{self.weight}--> {self.destination}]"


class Graph:
    """
    Adjacency map over named vertices.

    Each vertex maps neighbour label -> Edge, and the graph keeps every edge
    once under its canonical key. Vertices and edges are enumerated in
    insertion order, which makes traversals and MST runs reproducible.
    """

    def __init__(self, graph_id, directed=False):
        self.id = graph_id
        self.directed = directed
        self._adjacency = {}  # vertex -> {neighbor: Edge}
        self._edges = {}  # canonical key -> Edge

    @classmethod
    def from_lists(cls, graph_id, vertices, edges, directed=False):
        """Build a graph from a vertex list and an edge list"""
        graph = cls(graph_id, directed=directed)
        for vertex in vertices:
            graph.add_vertex(vertex)
        for edge in edges:
            graph.add_edge(edge)
        return graph

    # Vertex operations

    def add_vertex(self, vertex):
        if not isinstance(vertex, str) or not vertex:
            raise GraphError(f"Vertex label must be a non-empty string, got {vertex!r}")
        self._adjacency.setdefault(vertex, {})

    def contains_vertex(self, vertex):
        return vertex in self._adjacency

    def vertices(self):
        return list(self._adjacency)

    def vertex_count(self):
        return len(self._adjacency)

    # Edge operations

    def add_edge(self, edge):
        """Insert edge and update adjacency of its endpoints"""
        for vertex in (edge.source, edge.destination):
            if vertex not in self._adjacency:
                raise UnknownVertexError(
                    f"Vertex {vertex!r} must be added to graph {self.id!r} "
                    f"before edge {edge.id}"
                )

        if edge.key in self._edges:
            return

        self._edges[edge.key] = edge
        self._adjacency[edge.source][edge.destination] = edge
        if not self.directed:
            self._adjacency[edge.destination][edge.source] = edge

    def contains_edge(self, source, destination):
        adjacent = self._adjacency.get(source)
        return adjacent is not None and destination in adjacent

    def edges(self):
        return list(self._edges.values())

    def edge_count(self):
        return len(self._edges)

    def incident_edges(self, vertex):
        return list(self._adjacency.get(vertex, {}).values())

    def neighbors(self, vertex):
        return list(self._adjacency.get(vertex, {}))

    def degree(self, vertex):
        return len(self._adjacency.get(vertex, {}))

    # Structure analysis

    def _bfs(self, start):
        reached = {start}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            for neighbor in self._adjacency[current]:
                if neighbor not in reached:
                    reached.add(neighbor)
                    queue.append(neighbor)

        return reached

    def is_connected(self):
        """Check that every vertex is reachable from the first one"""
        if not self._adjacency:
            return True

        start = next(iter(self._adjacency))
        return len(self._bfs(start)) == len(self._adjacency)

    def connected_components(self):
        """Partition the vertices into components, in vertex order"""
        components = []
        visited = set()

        for vertex in self._adjacency:
            if vertex not in visited:
                component = self._bfs(vertex)
                components.append(component)
                visited.update(component)

        return components

    def density(self):
        n = self.vertex_count()
        if n <= 1:
            return 0.0

        max_edges = n * (n - 1) if self.directed else n * (n - 1) / 2
        return self.edge_count() / max_edges

    def create_subgraph(self, vertex_subset):
        """Project the graph onto the given vertices"""
        subset = set(vertex_subset)
        subgraph = Graph(f"{self.id}_subgraph", directed=self.directed)

        for vertex in self._adjacency:
            if vertex in subset:
                subgraph.add_vertex(vertex)

        for edge in self._edges.values():
            if edge.source in subset and edge.destination in subset:
                subgraph.add_edge(edge)

        return subgraph

    def to_networkx(self):
        """Convert to a networkx graph with a weight attribute on every edge"""
        nx_graph = nx.DiGraph() if self.directed else nx.Graph()
        nx_graph.add_nodes_from(self._adjacency)
        for edge in self._edges.values():
            nx_graph.add_edge(edge.source, edge.destination, weight=edge.weight)
        return nx_graph

    def detailed_info(self):
        connected = self.is_connected()
        lines = [
            "=== Graph Details ===",
            f"ID: {self.id}",
            f"Vertices: {self.vertex_count()}",
            f"Edges: {self.edge_count()}",
            f"Density: {self.density():.4f}",
            f"Connected: {connected}",
            f"Directed: {self.directed}",
        ]

        if not connected:
            components = self.connected_components()
            lines.append(f"Connected Components: {len(components)}")
            for i, component in enumerate(components, 1):
                lines.append(f"  Component {i}: {len(component)} vertices")

        lines.append("")
        lines.append("Vertex Degrees:")
        for vertex in sorted(self._adjacency):
            lines.append(f"  {vertex}: degree {self.degree(vertex)}")

        return "\n".join(lines) + "\n"

    def __str__(self):
        return (
            f"Graph{{id='{self.id}', vertices={self.vertex_count()}, "
            f"edges={self.edge_count()}, density={self.density():.3f}, "
            f"connected={self.is_connected()}}}"
        )

    def __repr__(self):
        return (
            f"Graph(id={self.id!r}, directed={self.directed}, "
            f"vertices={self.vertex_count()}, edges={self.edge_count()})"
        )
