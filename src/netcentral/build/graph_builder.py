# src/netcentral/build/graph_builder.py

"""
Graph construction utilities.

This module is responsible ONLY for:
  - validating raw (u, v) integer edge pairs
  - building a simple undirected NetworkX graph (duplicates collapse)
  - freezing the adjacency so downstream passes can share it read-only
  - returning basic build statistics

It deliberately does NOT perform any analysis (centrality, components, etc.),
keeping a clean separation of concerns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Integral
from typing import Iterable, Optional, Tuple

import networkx as nx

from ..utils.errors import GraphInputError

logger = logging.getLogger(__name__)


@dataclass
class BuildStats:
    n_nodes: int
    n_edges: int
    n_input_edges: int
    n_duplicates: int
    n_self_loops_dropped: int
    n_isolates: int


def _check_id(node: object, n_nodes: Optional[int], lineno: int) -> int:
    # bool is an Integral subclass but never a valid id
    if isinstance(node, bool) or not isinstance(node, Integral):
        raise GraphInputError(f"Edge #{lineno}: node id {node!r} is not an integer")
    node = int(node)
    if node < 0:
        raise GraphInputError(f"Edge #{lineno}: node id {node} is negative")
    if n_nodes is not None and node >= n_nodes:
        raise GraphInputError(
            f"Edge #{lineno}: node id {node} is out of range for {n_nodes} nodes"
        )
    return node


def build_graph(
    edges: Iterable[Tuple[int, int]],
    n_nodes: Optional[int] = None,
    drop_self_loops: bool = False,
) -> Tuple[nx.Graph, BuildStats]:
    """
    Build a frozen, simple, undirected graph from integer edge pairs.

    Parameters
    ----------
    edges : Iterable[Tuple[int, int]]
        Node id pairs. (u, v) and (v, u) describe the same edge.
    n_nodes : int, optional
        Size of the node universe. When given, every id must lie in
        [0, n_nodes) and all n_nodes nodes are present in the graph, so
        ids without edges become isolated nodes. When omitted, the universe
        is the set of ids that appear in at least one edge.
    drop_self_loops : bool
        Self-loops are rejected with GraphInputError unless this is set,
        in which case they are skipped and counted.

    Returns
    -------
    (G, stats) : Tuple[nx.Graph, BuildStats]
    """
    if n_nodes is not None and n_nodes < 0:
        raise GraphInputError(f"n_nodes must be >= 0, got {n_nodes}")

    G = nx.Graph()
    if n_nodes is not None:
        G.add_nodes_from(range(n_nodes))

    n_input = 0
    n_dupes = 0
    n_loops = 0

    for lineno, pair in enumerate(edges, start=1):
        try:
            a, b = pair
        except (TypeError, ValueError):
            raise GraphInputError(f"Edge #{lineno}: expected a (u, v) pair, got {pair!r}") from None

        u = _check_id(a, n_nodes, lineno)
        v = _check_id(b, n_nodes, lineno)
        n_input += 1

        if u == v:
            if not drop_self_loops:
                raise GraphInputError(f"Edge #{lineno}: self-loop on node {u}")
            n_loops += 1
            G.add_node(u)
            continue

        if G.has_edge(u, v):
            n_dupes += 1
            continue

        G.add_edge(u, v)

    if n_loops:
        logger.warning("Dropped %d self-loop edge(s)", n_loops)

    n_isolates = sum(1 for _ in nx.isolates(G))
    stats = BuildStats(
        n_nodes=G.number_of_nodes(),
        n_edges=G.number_of_edges(),
        n_input_edges=n_input,
        n_duplicates=n_dupes,
        n_self_loops_dropped=n_loops,
        n_isolates=n_isolates,
    )
    logger.debug("Built graph: %s", stats)

    return nx.freeze(G), stats
