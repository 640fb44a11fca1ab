# src/netcentral/analytics/centrality.py

"""
Centrality metric computations for large undirected graphs.

This module computes:
  - Degree centrality (raw neighbor counts, every node)
  - Top-k selection by degree
  - Closeness centrality for a subset of source nodes
  - Betweenness centrality with a subset of sources (Brandes accumulation)

Closeness and betweenness cost O(|sources| * (V + E)); callers restrict the
sources to a bounded subset (the top-k nodes by degree) while every BFS
still traverses the full graph.

Per-source passes are independent, so both measures can fan out over a
process pool (n_jobs > 1). Each worker fills a private map and the maps are
merged once, in source order.
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from typing import Callable, Dict, Iterable, List

import networkx as nx

from ..utils.errors import ConfigurationError, GraphInputError

logger = logging.getLogger(__name__)


def compute_degree(G: nx.Graph) -> Dict[int, int]:
    """
    Number of distinct neighbors for every node of G.

    Isolated nodes are included and mapped to 0, so the result always has
    exactly one entry per node and sums to 2 * |E|.
    """
    return dict(G.degree())


def top_k_by_degree(degree: Dict[int, int], k: int) -> List[int]:
    """
    The k highest-degree nodes, highest first, ties broken by smallest id.

    k larger than the number of nodes returns every node.
    """
    if k < 1:
        raise ConfigurationError(f"top-k size must be >= 1, got {k}")
    ranked = sorted(degree.items(), key=lambda kv: (-kv[1], kv[0]))
    return [node for node, _ in ranked[:k]]


# ---------------------------------------------------------------------------
# Source handling / fan-out
# ---------------------------------------------------------------------------
def _prepare_sources(G: nx.Graph, nodes: Iterable[int], measure: str) -> List[int]:
    sources = sorted(set(nodes))
    if not sources:
        raise ConfigurationError(f"{measure} needs at least one source node")
    missing = [n for n in sources if n not in G]
    if missing:
        preview = ", ".join(str(n) for n in missing[:10])
        raise GraphInputError(f"{measure}: {len(missing)} source node(s) not in graph: {preview}")
    return sources


def _chunks(items: List[int], n: int) -> List[List[int]]:
    """Split into at most n contiguous, non-empty slices of near-equal size."""
    n = max(1, min(n, len(items)))
    size, extra = divmod(len(items), n)
    out: List[List[int]] = []
    start = 0
    for i in range(n):
        stop = start + size + (1 if i < extra else 0)
        out.append(items[start:stop])
        start = stop
    return out


def _fan_out(
    worker: Callable[[nx.Graph, List[int]], Dict[int, float]],
    G: nx.Graph,
    sources: List[int],
    n_jobs: int,
) -> List[Dict[int, float]]:
    if n_jobs < 1:
        raise ConfigurationError(f"n_jobs must be >= 1, got {n_jobs}")
    if n_jobs == 1 or len(sources) == 1:
        return [worker(G, sources)]

    parts = _chunks(sources, n_jobs)
    logger.debug("Dispatching %d sources over %d workers", len(sources), len(parts))
    with ProcessPoolExecutor(max_workers=len(parts)) as pool:
        return list(pool.map(worker, [G] * len(parts), parts))


# ---------------------------------------------------------------------------
# Closeness
# ---------------------------------------------------------------------------
def _closeness_chunk(G: nx.Graph, sources: List[int]) -> Dict[int, float]:
    # (reachable - 1) / total distance; no N - 1 scaling
    return {s: nx.closeness_centrality(G, u=s, wf_improved=False) for s in sources}


def compute_closeness(
    G: nx.Graph,
    nodes_subset: Iterable[int],
    n_jobs: int = 1,
) -> Dict[int, float]:
    """
    Closeness centrality of each subset node over its own component.

    closeness(s) = (r - 1) / sum(d(s, t)) where r counts the nodes reachable
    from s (s included) and the sum runs over those nodes only. Isolated
    nodes score 0.

    Parameters
    ----------
    G : nx.Graph
        Full adjacency; every BFS traverses all of it.
    nodes_subset : Iterable[int]
        Source nodes. Must be non-empty and contained in G.
    n_jobs : int
        Worker processes; 1 runs inline.

    Returns
    -------
    Dict[int, float]
        {node: closeness} for the subset nodes only.
    """
    sources = _prepare_sources(G, nodes_subset, "closeness")
    closeness: Dict[int, float] = {}
    for part in _fan_out(_closeness_chunk, G, sources, n_jobs):
        closeness.update(part)
    return closeness


# ---------------------------------------------------------------------------
# Betweenness
# ---------------------------------------------------------------------------
def _betweenness_chunk(G: nx.Graph, sources: List[int]) -> Dict[int, float]:
    # already halved for undirected graphs
    return nx.betweenness_centrality_subset(
        G, sources=sources, targets=list(G), normalized=False
    )


def compute_betweenness(
    G: nx.Graph,
    nodes_subset: Iterable[int],
    n_jobs: int = 1,
    normalized: bool = False,
) -> Dict[int, float]:
    """
    Betweenness centrality using the subset nodes as BFS sources.

    For every source s, Brandes dependencies are accumulated over the full
    graph (nx.betweenness_centrality_subset with every node as a target), so
    paths tied in length share credit across all their predecessors.
    Dependencies are summed over all sources and halved, since every
    undirected pair is seen from both endpoints when both are sources. With
    every node of G as a source this is exact betweenness.

    Parameters
    ----------
    G : nx.Graph
    nodes_subset : Iterable[int]
        Source nodes. Must be non-empty and contained in G.
    n_jobs : int
        Worker processes; 1 runs inline.
    normalized : bool
        If True, divide every returned score by the largest one (when > 0).

    Returns
    -------
    Dict[int, float]
        {node: betweenness} for the subset nodes only.
    """
    sources = _prepare_sources(G, nodes_subset, "betweenness")

    totals: Dict[int, float] = {}
    for part in _fan_out(_betweenness_chunk, G, sources, n_jobs):
        for node, value in part.items():
            totals[node] = totals.get(node, 0.0) + value

    scores = {s: totals.get(s, 0.0) for s in sources}

    if normalized:
        top = max(scores.values())
        if top > 0:
            scores = {s: v / top for s, v in scores.items()}

    return scores
