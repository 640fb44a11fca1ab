import itertools

import pytest

from netcentral.build.graph_builder import build_graph


def clique(nodes):
    return list(itertools.combinations(nodes, 2))


@pytest.fixture
def path_edges():
    # 0 - 1 - 2 - 3 - 4
    return [(0, 1), (1, 2), (2, 3), (3, 4)]


@pytest.fixture
def bridge_edges():
    # two 4-cliques {0..3} and {4..7} joined by the bridge 3 - 4
    return clique(range(4)) + clique(range(4, 8)) + [(3, 4)]


@pytest.fixture
def triangles_edges():
    return [(0, 1), (1, 2), (0, 2), (3, 4), (4, 5), (3, 5)]


@pytest.fixture
def path_graph(path_edges):
    G, _ = build_graph(path_edges)
    return G


@pytest.fixture
def bridge_graph(bridge_edges):
    G, _ = build_graph(bridge_edges)
    return G
