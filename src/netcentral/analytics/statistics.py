# src/netcentral/analytics/statistics.py

"""
Summary statistics for an analysis run.

This module reports:

1. Degree distribution:
      - mean / median / max degree over the full graph
      - handshake check: sum of degrees == 2 * |E|

2. Centrality correlations over the top-k subset (SciPy):
      - Spearman correlation between
            • degree vs closeness
            • degree vs betweenness

3. k-means cluster sizes.

Correlations are skipped (with a note) when the subset has 5 nodes or
fewer, or when one of the compared measures is constant.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import numpy as np
from scipy import stats


def _spearman(xs: List[float], ys: List[float]) -> Optional[Dict[str, float]]:
    if len(set(xs)) < 2 or len(set(ys)) < 2:
        return None
    res = stats.spearmanr(xs, ys)
    return {"correlation": float(res.correlation), "p_value": float(res.pvalue)}


def summary_statistics(
    degree: Dict[int, int],
    n_edges: int,
    subset: List[int],
    closeness: Dict[int, float],
    betweenness: Dict[int, float],
    cluster_sizes: Optional[List[int]] = None,
) -> Dict[str, Any]:
    """
    Parameters
    ----------
    degree : Dict[int, int]
        Degree of every node.
    n_edges : int
        Number of distinct undirected edges.
    subset : List[int]
        Nodes that carry closeness / betweenness.
    closeness, betweenness : Dict[int, float]
        Scores for the subset nodes.
    cluster_sizes : List[int], optional
        Members per k-means cluster.

    Returns
    -------
    Dict[str, Any]
        Contains:
          - degree_distribution {...}
          - centrality_correlations {...}
          - cluster_sizes [...]   (when given)
    """
    results: Dict[str, Any] = {}

    # ────────────────────────────────────────────────────────────────────────
    # 1. Degree distribution
    # ────────────────────────────────────────────────────────────────────────
    degs = np.fromiter(degree.values(), dtype=float, count=len(degree))
    if degs.size:
        results["degree_distribution"] = {
            "mean": float(degs.mean()),
            "median": float(np.median(degs)),
            "max": int(degs.max()),
            "handshake_ok": int(degs.sum()) == 2 * n_edges,
        }
    else:
        results["degree_distribution"] = {"note": "Empty graph"}

    # ────────────────────────────────────────────────────────────────────────
    # 2. Centrality correlations (Spearman)
    # ────────────────────────────────────────────────────────────────────────
    if len(subset) > 5:
        deg_vals = [float(degree.get(n, 0)) for n in subset]
        clo_vals = [closeness.get(n, 0.0) for n in subset]
        btw_vals = [betweenness.get(n, 0.0) for n in subset]

        correlations: Dict[str, Any] = {}
        for name, vals in (("degree_closeness", clo_vals), ("degree_betweenness", btw_vals)):
            corr = _spearman(deg_vals, vals)
            correlations[name] = corr if corr is not None else {"note": "Constant input"}
        results["centrality_correlations"] = correlations
    else:
        results["centrality_correlations"] = {"note": "Insufficient sample size"}

    # ────────────────────────────────────────────────────────────────────────
    # 3. Cluster sizes
    # ────────────────────────────────────────────────────────────────────────
    if cluster_sizes is not None:
        results["cluster_sizes"] = list(cluster_sizes)

    return results
