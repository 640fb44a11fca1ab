# src/netcentral/pipeline.py

"""
End-to-end analysis as a pure function of (edges, node count, parameters).

    edges ─► adjacency ─► degree ─► top-k subset ─► closeness, betweenness
                  │                                        │
                  └─► components + leaders                 ▼
                                               features ─► normalize ─► k-means

No file I/O and no module-level state; identical inputs give identical
outputs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

import networkx as nx

from .analytics.centrality import (
    compute_betweenness,
    compute_closeness,
    compute_degree,
    top_k_by_degree,
)
from .analytics.connectivity import Component, cluster_leaders, find_clusters
from .build.graph_builder import BuildStats, build_graph
from .clustering.features import Features, build_features, normalize_features
from .clustering.kmeans import KMeansResult, fit_kmeans
from .utils.constants import (
    KMEANS_INIT_DEFAULT,
    MAX_ITERS_DEFAULT,
    N_CLUSTERS_DEFAULT,
    TOP_K_DEFAULT,
)

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    graph: nx.Graph
    build_stats: BuildStats
    degree: Dict[int, int]
    subset: List[int]
    closeness: Dict[int, float]
    betweenness: Dict[int, float]
    components: List[Component]
    features: Dict[int, Features]
    normalized_features: Dict[int, Features]
    kmeans: KMeansResult

    @property
    def assignments(self) -> Dict[int, int]:
        return self.kmeans.assignments


def run_pipeline(
    edges: Iterable[Tuple[int, int]],
    n_nodes: Optional[int] = None,
    top_k: int = TOP_K_DEFAULT,
    k: int = N_CLUSTERS_DEFAULT,
    max_iters: int = MAX_ITERS_DEFAULT,
    n_jobs: int = 1,
    drop_self_loops: bool = False,
    init: str = KMEANS_INIT_DEFAULT,
) -> AnalysisResult:
    """
    Run every analysis stage over one edge list.

    Parameters
    ----------
    edges : Iterable[Tuple[int, int]]
        Undirected integer edges; duplicates collapse.
    n_nodes : int, optional
        Node universe size (ids in [0, n_nodes)); defaults to the ids seen.
    top_k : int
        Number of highest-degree nodes that receive closeness, betweenness
        and a k-means cluster.
    k : int
        Number of k-means clusters; must not exceed the subset size.
    max_iters : int
        k-means iteration cap.
    n_jobs : int
        Worker processes for the closeness / betweenness passes.
    drop_self_loops : bool
        Skip self-loops instead of rejecting the input.
    init : str
        k-means seeding strategy.
    """
    G, stats = build_graph(edges, n_nodes=n_nodes, drop_self_loops=drop_self_loops)
    logger.info("Graph: %d nodes, %d edges", stats.n_nodes, stats.n_edges)

    degree = compute_degree(G)
    subset = top_k_by_degree(degree, top_k)
    logger.info("Centrality subset: %d nodes", len(subset))

    closeness = compute_closeness(G, subset, n_jobs=n_jobs)
    betweenness = compute_betweenness(G, subset, n_jobs=n_jobs)

    components = cluster_leaders(find_clusters(G), degree)
    logger.info("Connected components: %d", len(components))

    features = build_features(subset, degree, closeness, betweenness)
    normalized = normalize_features(features)
    km = fit_kmeans(normalized, k, max_iters, init=init)
    logger.info("k-means: %d iterations (converged=%s)", km.n_iter, km.converged)

    return AnalysisResult(
        graph=G,
        build_stats=stats,
        degree=degree,
        subset=subset,
        closeness=closeness,
        betweenness=betweenness,
        components=components,
        features=features,
        normalized_features=normalized,
        kmeans=km,
    )
