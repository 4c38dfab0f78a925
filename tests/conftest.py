import pytest

from create_simple_test import create_simple_graphs


@pytest.fixture
def simple_graphs():
    return {graph.id: graph for graph, _ in create_simple_graphs()}


@pytest.fixture
def square_graph(simple_graphs):
    return simple_graphs["simple_square"]


@pytest.fixture
def known_graph(simple_graphs):
    return simple_graphs["simple_known"]


@pytest.fixture
def disconnected_graph(simple_graphs):
    return simple_graphs["simple_disconnected"]
