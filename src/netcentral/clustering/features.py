# src/netcentral/clustering/features.py

"""
Per-node feature vectors for clustering.

Each subset node is described by (degree, closeness, betweenness). The three
dimensions live on very different scales (hundreds of neighbors vs. scores
below 1), so each one is min-max scaled to [0, 1] independently before
k-means sees it.
"""

from __future__ import annotations

from typing import Dict, Iterable, Tuple

import numpy as np

Features = Tuple[float, float, float]


def build_features(
    nodes: Iterable[int],
    degree: Dict[int, int],
    closeness: Dict[int, float],
    betweenness: Dict[int, float],
) -> Dict[int, Features]:
    """Raw (degree, closeness, betweenness) per node; missing scores are 0."""
    return {
        n: (
            float(degree.get(n, 0)),
            float(closeness.get(n, 0.0)),
            float(betweenness.get(n, 0.0)),
        )
        for n in nodes
    }


def normalize_features(features: Dict[int, Features]) -> Dict[int, Features]:
    """
    Min-max scale every dimension to [0, 1]: (x - min) / (max - min).

    A dimension with max == min carries no information and is set to 0 for
    every node instead of dividing by zero. The input mapping is left
    untouched; the result has the same keys.
    """
    if not features:
        return {}

    nodes = list(features)
    X = np.array([features[n] for n in nodes], dtype=float)

    lo = X.min(axis=0)
    span = X.max(axis=0) - lo
    constant = span == 0

    scaled = (X - lo) / np.where(constant, 1.0, span)
    scaled[:, constant] = 0.0

    return {n: tuple(float(x) for x in row) for n, row in zip(nodes, scaled)}
