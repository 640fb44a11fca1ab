# src/netcentral/clustering/kmeans.py

"""
Deterministic k-means over normalized node feature vectors.

Seeding never uses randomness. Nodes are ordered by ascending id and:

  - "farthest" (default): centroid 0 is the first node's vector; every next
    centroid is the vector farthest from its nearest chosen centroid
    (ties -> smallest node id).
  - "first": the first k distinct vectors in node-id order.

If fewer than k distinct vectors exist, the missing centroids repeat
centroid 0. Assignment ties go to the lowest cluster index, so those
duplicates never win a node and their clusters simply stay empty.

Each iteration assigns every node to its nearest centroid (Euclidean) and
moves each centroid to the mean of its members. An empty cluster keeps its
previous centroid. The loop stops when no assignment changes or after
max_iters iterations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np

from ..utils.constants import KMEANS_INIT_DEFAULT, KMEANS_INITS
from ..utils.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class KMeansResult:
    assignments: Dict[int, int]
    centroids: List[tuple]
    n_iter: int
    converged: bool
    inertia: float

    def cluster_sizes(self) -> List[int]:
        sizes = [0] * len(self.centroids)
        for cid in self.assignments.values():
            sizes[cid] += 1
        return sizes


def _seed_first(X: np.ndarray, k: int) -> np.ndarray:
    chosen: List[np.ndarray] = []
    for row in X:
        if not any(np.array_equal(row, c) for c in chosen):
            chosen.append(row)
            if len(chosen) == k:
                break
    while len(chosen) < k:
        chosen.append(chosen[0])
    return np.array(chosen, dtype=float)


def _seed_farthest(X: np.ndarray, k: int) -> np.ndarray:
    centroids = [X[0]]
    nearest = np.linalg.norm(X - X[0], axis=1)
    while len(centroids) < k:
        idx = int(np.argmax(nearest))  # first max = smallest node id
        if nearest[idx] == 0:
            centroids.extend([X[0]] * (k - len(centroids)))
            break
        centroids.append(X[idx])
        nearest = np.minimum(nearest, np.linalg.norm(X - X[idx], axis=1))
    return np.array(centroids, dtype=float)


def _assign(X: np.ndarray, centroids: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Nearest centroid per row and the squared distance to it."""
    dists = np.linalg.norm(X[:, None, :] - centroids[None, :, :], axis=2)
    labels = np.argmin(dists, axis=1)
    return labels, dists[np.arange(len(X)), labels] ** 2


def fit_kmeans(
    features: Dict[int, Sequence[float]],
    k: int,
    max_iters: int,
    init: str = KMEANS_INIT_DEFAULT,
) -> KMeansResult:
    """
    Partition the feature vectors into exactly k clusters.

    Parameters
    ----------
    features : Dict[int, Sequence[float]]
        {node: vector}; all vectors must have the same length.
    k : int
        Number of clusters, 1 <= k <= len(features).
    max_iters : int
        Upper bound on assignment/update rounds (>= 1).
    init : str
        "farthest" or "first" (see module docstring).

    Returns
    -------
    KMeansResult
        assignments {node: cluster id in [0, k)}, final centroids, the number
        of iterations run, whether assignments stabilized, and the within-
        cluster sum of squared distances to the centroids that produced the
        final assignment.
    """
    if not features:
        raise ConfigurationError("k-means needs at least one feature vector")
    if k < 1:
        raise ConfigurationError(f"k must be >= 1, got {k}")
    if k > len(features):
        raise ConfigurationError(f"k={k} exceeds the number of nodes ({len(features)})")
    if max_iters < 1:
        raise ConfigurationError(f"max_iters must be >= 1, got {max_iters}")
    if init not in KMEANS_INITS:
        raise ConfigurationError(f"init must be one of {KMEANS_INITS}, got {init!r}")

    nodes = sorted(features)
    X = np.array([features[n] for n in nodes], dtype=float)

    centroids = _seed_first(X, k) if init == "first" else _seed_farthest(X, k)

    labels = None
    converged = False
    n_iter = 0

    for n_iter in range(1, max_iters + 1):
        new_labels, sq_dists = _assign(X, centroids)
        if labels is not None and np.array_equal(new_labels, labels):
            converged = True
            break
        labels = new_labels

        for c in range(k):
            members = X[labels == c]
            if len(members):
                centroids[c] = members.mean(axis=0)

    # measured at the last assignment step, before any later centroid update
    inertia = float(sq_dists.sum())
    logger.debug("k-means: k=%d iterations=%d converged=%s inertia=%.6f", k, n_iter, converged, inertia)

    return KMeansResult(
        assignments={n: int(c) for n, c in zip(nodes, labels)},
        centroids=[tuple(float(x) for x in row) for row in centroids],
        n_iter=n_iter,
        converged=converged,
        inertia=inertia,
    )


def kmeans(
    features: Dict[int, Sequence[float]],
    k: int,
    max_iters: int,
    init: str = KMEANS_INIT_DEFAULT,
) -> Dict[int, int]:
    """Cluster id in [0, k) for every node of `features`."""
    return fit_kmeans(features, k, max_iters, init=init).assignments
