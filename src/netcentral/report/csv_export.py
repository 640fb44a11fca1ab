# src/netcentral/report/csv_export.py

"""
CSV export utilities.

This module writes:
  - Centralities for the top-k subset (degree, closeness, betweenness,
    normalized features, k-means cluster)
  - Connected components (id, size, leader, leader degree)
  - Node -> k-means cluster

All functions create parent directories before writing.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..analytics.connectivity import Component
from ..loader.edgelist_loader import Identity
from ..pipeline import AnalysisResult


# ---------------------------------------------------------------------------
# Helper: safe writer
# ---------------------------------------------------------------------------
def _write_csv(path: Path, rows: List[Dict[str, Any]], fieldnames: List[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for r in rows:
            writer.writerow(r)
    print(f"[INFO] Saved CSV → {path}")


def _identity_cols(node: int, identities: Optional[Dict[int, Identity]]) -> Dict[str, str]:
    email, folder = (identities or {}).get(node, ("", ""))
    return {"email": email, "folder": folder}


# ---------------------------------------------------------------------------
# CENTRALITY
# ---------------------------------------------------------------------------
def export_centrality_csv(
    result: AnalysisResult,
    path: Path,
    identities: Optional[Dict[int, Identity]] = None,
) -> None:
    """
    One row per subset node, in degree-rank order:
      node, email, folder, degree, closeness, betweenness,
      degree_norm, closeness_norm, betweenness_norm, kmeans_cluster
    """
    rows = []
    for node in result.subset:
        d_n, c_n, b_n = result.normalized_features[node]
        rows.append({
            "node": node,
            **_identity_cols(node, identities),
            "degree": result.degree[node],
            "closeness": result.closeness[node],
            "betweenness": result.betweenness[node],
            "degree_norm": d_n,
            "closeness_norm": c_n,
            "betweenness_norm": b_n,
            "kmeans_cluster": result.assignments[node],
        })

    _write_csv(path, rows, [
        "node", "email", "folder",
        "degree", "closeness", "betweenness",
        "degree_norm", "closeness_norm", "betweenness_norm",
        "kmeans_cluster",
    ])


# ---------------------------------------------------------------------------
# COMPONENTS
# ---------------------------------------------------------------------------
def export_components_csv(
    components: List[Component],
    path: Path,
    identities: Optional[Dict[int, Identity]] = None,
) -> None:
    """
    Write components to CSV: component, size, leader, email, folder, leader_degree
    """
    rows = []
    for comp in components:
        rows.append({
            "component": comp.cid,
            "size": comp.size,
            "leader": comp.leader,
            **_identity_cols(comp.leader, identities),
            "leader_degree": comp.leader_degree,
        })

    _write_csv(path, rows, ["component", "size", "leader", "email", "folder", "leader_degree"])


# ---------------------------------------------------------------------------
# K-MEANS
# ---------------------------------------------------------------------------
def export_kmeans_csv(
    assignments: Dict[int, int],
    path: Path,
    identities: Optional[Dict[int, Identity]] = None,
) -> None:
    """
    Write node → cluster, sorted by cluster then node.
    """
    rows = [
        {"node": node, **_identity_cols(node, identities), "cluster": cid}
        for node, cid in sorted(assignments.items(), key=lambda kv: (kv[1], kv[0]))
    ]

    _write_csv(path, rows, ["node", "email", "folder", "cluster"])
